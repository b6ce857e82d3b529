"""Lifecycle error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``async_lifecycle.base.errors_parts`` behind a stable import path.
"""

from .cancellation_parts.abort_error import AbortError, CancelledError
from .errors_parts import (
    COMMON_PROPERTIES,
    ConditionError,
    FailureKind,
    LifecycleError,
    RejectWithValue,
    RejectedWithValueError,
    SerializedError,
    classify_failure,
    normalize_error,
    reject_with_value,
)

__all__ = [
    "AbortError",
    "CancelledError",
    "COMMON_PROPERTIES",
    "ConditionError",
    "FailureKind",
    "LifecycleError",
    "RejectWithValue",
    "RejectedWithValueError",
    "SerializedError",
    "classify_failure",
    "normalize_error",
    "reject_with_value",
]
