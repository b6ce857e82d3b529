"""Errors parts package public surface.

Re-exports the individual error taxonomy components for optional direct
imports. Prefer ``async_lifecycle.base.errors`` for the stable surface.
"""

from .classification import classify_failure
from .condition_error import ConditionError
from .failure_kind import FailureKind
from .lifecycle_error import LifecycleError, RejectedWithValueError
from .reject_with_value import RejectWithValue, reject_with_value
from .serialized_error import COMMON_PROPERTIES, SerializedError, normalize_error

__all__ = [
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
