"""
Failure classification for settled lifecycle events.

Maps the boolean flags carried on a Failed event's meta to a single
:class:`FailureKind`. Precedence follows how the orchestrator settles:
a condition skip never started, an abort overrides whatever the computation
was doing, and a deliberate rejection is distinguished from a thrown error.
"""
from __future__ import annotations

from typing import Any

from ..constants import STATUS_REJECTED
from .failure_kind import FailureKind


def classify_failure(event: Any) -> FailureKind:
    """Classify a Failed lifecycle event into a :class:`FailureKind`.

    Raises:
        ValueError: If ``event`` carries no rejected-status meta.
    """
    meta = getattr(event, "meta", None)
    if meta is None or getattr(meta, "request_status", None) != STATUS_REJECTED:
        raise ValueError(f"not a rejected lifecycle event: {event!r}")
    if meta.condition:
        return FailureKind.CONDITION
    if meta.aborted:
        return FailureKind.ABORTED
    if meta.rejected_with_value:
        return FailureKind.REJECTED_WITH_VALUE
    return FailureKind.THROWN


__all__ = ["classify_failure"]
