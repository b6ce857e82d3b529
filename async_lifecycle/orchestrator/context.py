"""Per-invocation context objects handed to the gate and the computation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..base.cancellation import AbortSignal
from ..base.errors import RejectWithValue

Dispatch = Callable[[Any], Any]
GetState = Callable[[], Any]


@dataclass(frozen=True)
class RequestContext:
    """Identity of one invocation; only the signal's flag ever changes."""

    request_id: str
    arg: Any
    signal: AbortSignal


@dataclass(frozen=True)
class GateAPI:
    """Readers available to the gate predicate."""

    get_state: GetState
    extra: Any


@dataclass(frozen=True)
class LifecycleAPI:
    """Second argument of every computation.

    ``dispatch``, ``get_state`` and ``extra`` are the environment the
    invocation runs in; ``signal`` reports abort requests; returning
    ``reject_with_value(v)`` settles the invocation as a deliberate rejection.
    """

    dispatch: Dispatch
    get_state: GetState
    extra: Any
    request_id: str
    signal: AbortSignal

    @staticmethod
    def reject_with_value(value: Any) -> RejectWithValue[Any]:
        return RejectWithValue(value)


__all__ = ["Dispatch", "GateAPI", "GetState", "LifecycleAPI", "RequestContext"]
