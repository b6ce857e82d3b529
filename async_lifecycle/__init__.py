"""
async_lifecycle

Lifecycle orchestration for asynchronous operations: request identity,
gating, cooperative cancellation, outcome classification, error
normalization and emission of correlated pending/fulfilled/rejected events
to an external sink.

Typical use::

    from async_lifecycle import create_lifecycle, EventRecorder

    async def load_user(user_id, api):
        user = await repo.get(user_id)
        if user is None:
            return api.reject_with_value({"user_id": user_id, "reason": "missing"})
        return user

    fetch_user = create_lifecycle("users/fetch", load_user)
    sink = EventRecorder()
    event = await fetch_user(42, dispatch=sink)
"""

from .base.cancellation import (
    AbortController,
    AbortError,
    AbortSignal,
    CancelledError,
    NoOpAbortController,
    cancellation_supported,
)
from .base.errors import (
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
from .base.logging import configure_logger, get_logger
from .config import LifecycleConfig, get_lifecycle_config
from .events import (
    EventType,
    Failed,
    LifecycleEvent,
    LifecycleFamily,
    Started,
    Succeeded,
    build_family,
    create_event_type,
)
from .orchestrator import (
    GateAPI,
    InvocationHandle,
    LifecycleAPI,
    LifecycleAction,
    LifecycleOptions,
    Orchestrator,
    RequestContext,
    create_lifecycle,
    generate_request_id,
    unwrap_result,
)
from .sink import EventRecorder

__all__ = [
    # Orchestration
    "create_lifecycle",
    "Orchestrator",
    "LifecycleOptions",
    "LifecycleAction",
    "LifecycleAPI",
    "GateAPI",
    "RequestContext",
    "InvocationHandle",
    "unwrap_result",
    "generate_request_id",
    # Events
    "EventType",
    "create_event_type",
    "LifecycleEvent",
    "LifecycleFamily",
    "Started",
    "Succeeded",
    "Failed",
    "build_family",
    # Errors
    "SerializedError",
    "normalize_error",
    "RejectWithValue",
    "reject_with_value",
    "FailureKind",
    "classify_failure",
    "LifecycleError",
    "RejectedWithValueError",
    "ConditionError",
    # Cancellation
    "AbortController",
    "NoOpAbortController",
    "AbortSignal",
    "AbortError",
    "CancelledError",
    "cancellation_supported",
    # Ambient
    "EventRecorder",
    "LifecycleConfig",
    "get_lifecycle_config",
    "configure_logger",
    "get_logger",
]
