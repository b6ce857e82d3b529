"""Fallback abort controller for runtimes with cancellation disabled.

The signal of a ``NoOpAbortController`` never transitions. ``abort`` only
emits a diagnostic notice, at most once per process, when diagnostics are
enabled in the lifecycle configuration.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

from ...config import get_lifecycle_config
from ..constants import FALLBACK_CANCELLATION_NOTICE
from ..logging import get_logger, log_event
from .abort_signal import AbortSignal


class NoOpAbortController:
    """Controller that accepts ``abort`` calls but never aborts."""

    _notice_shown: ClassVar[bool] = False

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.signal = AbortSignal()
        self._logger = logger

    def abort(self, reason: str | None = None) -> None:
        """Emit the one-time diagnostic notice; the signal stays untouched."""
        if not get_lifecycle_config().diagnostics_enabled:
            return
        if NoOpAbortController._notice_shown:
            return
        NoOpAbortController._notice_shown = True
        logger = self._logger or get_logger("lifecycle.cancellation")
        log_event(logger, "lifecycle.cancellation.unsupported", notice=FALLBACK_CANCELLATION_NOTICE, reason=reason)


__all__ = ["NoOpAbortController"]
