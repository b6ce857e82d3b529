"""AbortControllerLike Protocol (single-class module).

Structural contract shared by the real and the fallback abort controllers so
the orchestrator can hold either without inspecting concrete types.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .abort_signal import AbortSignal


@runtime_checkable
class AbortControllerLike(Protocol):
    """Controller exposing a signal and an abort operation."""

    signal: AbortSignal

    def abort(self, reason: str | None = None) -> None:
        """Request that the signal transition to aborted."""
        ...


__all__ = ["AbortControllerLike"]
