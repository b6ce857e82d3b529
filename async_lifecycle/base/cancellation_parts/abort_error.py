"""Cancellation error types.

``CancelledError`` marks cooperative cancellation in general; ``AbortError``
is the synthetic failure an invocation settles with when its abort signal
wins the race against the computation.
"""

from __future__ import annotations

from ..constants import ABORT_ERROR_NAME, DEFAULT_ABORT_MESSAGE


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinct from ``asyncio.CancelledError``: this one never interrupts a
    task, it only reports that a cancellation request was observed.
    """


class AbortError(CancelledError):
    """Synthetic failure produced by an aborted invocation.

    ``name`` is fixed to ``"AbortError"`` so serialized errors keep a stable
    marker; ``reason`` is the caller-supplied reason, if any.
    """

    name = ABORT_ERROR_NAME

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        self.message = reason or DEFAULT_ABORT_MESSAGE
        super().__init__(self.message)


__all__ = ["CancelledError", "AbortError"]
