"""Native abort controller.

``AbortController`` owns an ``AbortSignal`` and flips it on the first
``abort`` call. Subsequent calls are no-ops and keep the original reason.
"""

from __future__ import annotations

from .abort_signal import AbortSignal


class AbortController:
    """Controller whose ``abort`` transitions its signal exactly once."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: str | None = None) -> None:
        """Abort the signal; safe to invoke multiple times."""
        self.signal._trigger(reason)


__all__ = ["AbortController"]
