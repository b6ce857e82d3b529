"""Abort signal implementation.

Exposes ``AbortSignal``, the observable half of an abort controller. A signal
moves from not-aborted to aborted exactly once; listeners are notified on
that transition and can also be registered after the fact.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List

from .abort_error import AbortError
from .state import State

AbortListener = Callable[["AbortSignal"], None]


class AbortSignal:
    """One-way, idempotent abort flag with listener notification.

    Thread-safe for ``_trigger`` + ``aborted`` usage. Listeners run on the
    thread that triggers the abort, outside the internal lock.
    """

    def __init__(self) -> None:
        self._state = State()
        self._lock = Lock()
        self._listeners: List[AbortListener] = []

    @property
    def aborted(self) -> bool:  # noqa: D401 - short form
        """Whether an abort has been requested."""
        return self._state.aborted

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason supplied with the first abort request (if any)."""
        return self._state.reason

    def add_listener(self, listener: AbortListener) -> None:
        """Register ``listener``; invoked immediately when already aborted."""
        with self._lock:
            if not self._state.aborted:
                self._listeners.append(listener)
                return
        listener(self)

    def remove_listener(self, listener: AbortListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def raise_if_aborted(self) -> None:
        """Raise ``AbortError`` if the signal has been aborted."""
        if self._state.aborted:
            raise AbortError(self._state.reason)

    def _trigger(self, reason: str | None) -> bool:
        """Transition to aborted; returns False when already aborted."""
        with self._lock:
            if self._state.aborted:
                return False
            self._state.aborted = True
            self._state.reason = reason
            listeners = list(self._listeners)
            self._listeners.clear()
        for listener in listeners:
            listener(self)
        return True

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"AbortSignal(aborted={self._state.aborted}, "
            f"reason={self._state.reason!r}, listeners={len(self._listeners)})"
        )


__all__ = ["AbortSignal", "AbortListener"]
