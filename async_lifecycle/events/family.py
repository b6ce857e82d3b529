"""Correlated event family of one orchestrator.

``build_family`` produces the pending/fulfilled/rejected constructors that
share a type prefix, plus a static tag-to-status table used by
``LifecycleFamily.phase_of`` so sinks can dispatch on lifecycle phase
without depending on the orchestrator.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from ..base.cancellation_parts.abort_error import AbortError
from ..base.constants import (
    FULFILLED_SUFFIX,
    PENDING_SUFFIX,
    REJECTED_FALLBACK_MESSAGE,
    REJECTED_SUFFIX,
    STATUS_FULFILLED,
    STATUS_PENDING,
    STATUS_REJECTED,
)
from ..base.errors_parts.condition_error import ConditionError
from ..base.errors_parts.serialized_error import normalize_error
from .lifecycle_events import (
    Failed,
    FulfilledMeta,
    PendingMeta,
    RejectedMeta,
    Started,
    Succeeded,
)
from .tagged import EventType, create_event_type

ErrorSerializer = Callable[[Any], Any]


@dataclass(frozen=True)
class LifecycleFamily:
    """Pending/fulfilled/rejected constructors sharing ``type_prefix``."""

    type_prefix: str
    pending: EventType[Started]
    fulfilled: EventType[Succeeded]
    rejected: EventType[Failed]
    phases: Mapping[str, str]

    def phase_of(self, event: Any) -> Optional[str]:
        """Return the request status for one of this family's events, else ``None``."""
        return self.phases.get(getattr(event, "type", None))

    def owns(self, event: Any) -> bool:
        return self.phase_of(event) is not None


def _failure_source(error: Any, *, aborted: bool, condition: bool) -> Any:
    """Value handed to the serializer when no original failure exists."""
    if error is not None:
        return error
    if condition:
        return ConditionError()
    if aborted:
        return AbortError()
    return REJECTED_FALLBACK_MESSAGE


def build_family(type_prefix: str, serialize_error: Optional[ErrorSerializer] = None) -> LifecycleFamily:
    """Build the event family for ``type_prefix``.

    ``serialize_error`` defaults to :func:`normalize_error` and shapes the
    ``serialized_error`` of every Failed event.
    """
    serializer = serialize_error or normalize_error

    def _pending(tag: str, request_id: str, arg: Any) -> Started:
        return Started(type=tag, meta=PendingMeta(arg=arg, request_id=request_id))

    def _fulfilled(tag: str, result: Any, request_id: str, arg: Any) -> Succeeded:
        return Succeeded(type=tag, payload=result, meta=FulfilledMeta(arg=arg, request_id=request_id))

    def _rejected(
        tag: str,
        error: Optional[BaseException],
        request_id: str,
        arg: Any,
        *,
        payload: Any = None,
        rejected_with_value: bool = False,
        aborted: bool = False,
        condition: bool = False,
    ) -> Failed:
        return Failed(
            type=tag,
            payload=payload if rejected_with_value else None,
            error=error,
            serialized_error=serializer(_failure_source(error, aborted=aborted, condition=condition)),
            meta=RejectedMeta(
                arg=arg,
                request_id=request_id,
                rejected_with_value=rejected_with_value,
                aborted=aborted,
                condition=condition,
            ),
        )

    pending = create_event_type(type_prefix + PENDING_SUFFIX, _pending)
    fulfilled = create_event_type(type_prefix + FULFILLED_SUFFIX, _fulfilled)
    rejected = create_event_type(type_prefix + REJECTED_SUFFIX, _rejected)
    return LifecycleFamily(
        type_prefix=type_prefix,
        pending=pending,
        fulfilled=fulfilled,
        rejected=rejected,
        phases=MappingProxyType(
            {
                pending.type: STATUS_PENDING,
                fulfilled.type: STATUS_FULFILLED,
                rejected.type: STATUS_REJECTED,
            }
        ),
    )


__all__ = ["ErrorSerializer", "LifecycleFamily", "build_family"]
