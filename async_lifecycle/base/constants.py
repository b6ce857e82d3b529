"""Base shared constants for the lifecycle layer.

Central location to avoid scattering magic strings across the event,
cancellation and orchestration modules. Values here appear in emitted events
and serialized errors and are considered a stable public contract.
"""
from __future__ import annotations

# Event tag suffixes (appended to the orchestrator's type prefix)
PENDING_SUFFIX = "/pending"
FULFILLED_SUFFIX = "/fulfilled"
REJECTED_SUFFIX = "/rejected"

# Request status values carried on event meta
STATUS_PENDING = "pending"
STATUS_FULFILLED = "fulfilled"
STATUS_REJECTED = "rejected"

# Synthetic failure names
ABORT_ERROR_NAME = "AbortError"
CONDITION_ERROR_NAME = "ConditionError"
REJECT_WITH_VALUE_NAME = "RejectWithValue"

# Default messages
DEFAULT_ABORT_MESSAGE = "Aborted"
CONDITION_SKIP_MESSAGE = "Aborted due to condition callback returning false."
REJECTED_FALLBACK_MESSAGE = "Rejected"

FALLBACK_CANCELLATION_NOTICE = (
    "This runtime has cancellation disabled; abort() calls are ignored and the "
    "computation runs to completion. Unset LIFECYCLE_DISABLE_CANCELLATION or pass "
    "cancellable=True to react to abort requests."
)

__all__ = [
    "PENDING_SUFFIX",
    "FULFILLED_SUFFIX",
    "REJECTED_SUFFIX",
    "STATUS_PENDING",
    "STATUS_FULFILLED",
    "STATUS_REJECTED",
    "ABORT_ERROR_NAME",
    "CONDITION_ERROR_NAME",
    "REJECT_WITH_VALUE_NAME",
    "DEFAULT_ABORT_MESSAGE",
    "CONDITION_SKIP_MESSAGE",
    "REJECTED_FALLBACK_MESSAGE",
    "FALLBACK_CANCELLATION_NOTICE",
]
