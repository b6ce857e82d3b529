"""
Lifecycle base package.

Provider-agnostic building blocks shared by the event and orchestration
layers: constants, cancellation primitives, the error taxonomy and
structured logging.
"""

from .cancellation import (
    AbortController,
    AbortError,
    AbortSignal,
    CancelledError,
    InvocationCancellation,
    NoOpAbortController,
    cancellation_supported,
    controller_factory,
)
from .errors import (
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
from .logging import LogContext, configure_logger, get_logger, log_event, normalized_log_event

__all__ = [
    # Cancellation
    "AbortController",
    "AbortError",
    "AbortSignal",
    "CancelledError",
    "InvocationCancellation",
    "NoOpAbortController",
    "cancellation_supported",
    "controller_factory",
    # Errors
    "ConditionError",
    "FailureKind",
    "LifecycleError",
    "RejectWithValue",
    "RejectedWithValueError",
    "SerializedError",
    "classify_failure",
    "normalize_error",
    "reject_with_value",
    # Logging
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "normalized_log_event",
]
