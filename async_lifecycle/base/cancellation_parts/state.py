"""Internal state holder for abort signals.

Dataclass used by ``AbortSignal`` to track the one-way aborted flag and the
reason supplied with the first abort request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Internal state for abort signals."""

    aborted: bool = False
    reason: Optional[str] = None


__all__ = ["State"]
