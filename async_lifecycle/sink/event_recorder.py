"""In-memory reference sink.

``EventRecorder`` is a minimal dispatch target: it records every event in
order, feeds it through an optional reducer, notifies subscribers and runs
:class:`LifecycleAction` values with itself as the environment. Suitable for
tests and single-process embedding; not thread-safe.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from ..events import EventType
from ..orchestrator import LifecycleAction

Reducer = Callable[[Any, Any], Any]
Subscriber = Callable[[Any], None]


class EventRecorder:
    """Recording event sink with optional state reduction.

    Parameters
    ----------
    state:
        Initial state returned by ``get_state``.
    reducer:
        Optional ``(state, event) -> state`` applied to every recorded event.
    extra:
        Opaque value forwarded to actions run through ``dispatch``.
    """

    def __init__(self, state: Any = None, reducer: Optional[Reducer] = None, extra: Any = None) -> None:
        self._state = state
        self._reducer = reducer
        self.extra = extra
        self._events: List[Any] = []
        self._subscribers: List[Subscriber] = []

    def __call__(self, event: Any) -> Any:
        return self.dispatch(event)

    def dispatch(self, event: Any) -> Any:
        """Record ``event`` and return it; actions are run and their handle returned."""
        if isinstance(event, LifecycleAction):
            return event(self.dispatch, self.get_state, self.extra)
        self._events.append(event)
        if self._reducer is not None:
            self._state = self._reducer(self._state, event)
        for subscriber in list(self._subscribers):
            subscriber(event)
        return event

    def get_state(self) -> Any:
        return self._state

    @property
    def events(self) -> Tuple[Any, ...]:
        return tuple(self._events)

    @property
    def types(self) -> List[str]:
        return [getattr(e, "type", None) for e in self._events]

    def of_type(self, event_type: EventType[Any]) -> List[Any]:
        """Recorded events matching ``event_type``."""
        return [e for e in self._events if event_type.match(e)]

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register ``subscriber``; returns a callable that unregisters it."""
        self._subscribers.append(subscriber)

        def _unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return _unsubscribe

    def clear(self) -> None:
        self._events.clear()


__all__ = ["EventRecorder", "Reducer", "Subscriber"]
