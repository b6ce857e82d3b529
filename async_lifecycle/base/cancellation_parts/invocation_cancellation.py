"""Per-invocation cancellation gate and controller selection.

``InvocationCancellation`` wraps the controller of one invocation and drops
abort requests until the orchestrator marks the invocation as started (gate
passed, Started event about to be emitted). ``controller_factory`` picks the
controller class once, from an explicit flag or the configuration probe.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ...config import get_lifecycle_config
from .abort_controller import AbortController
from .abort_signal import AbortSignal
from .controller_protocol import AbortControllerLike
from .noop_abort_controller import NoOpAbortController

ControllerFactory = Callable[[], AbortControllerLike]


def cancellation_supported() -> bool:
    """Return whether native cancellation is available under current config."""
    return not get_lifecycle_config().cancellation_disabled


def controller_factory(
    cancellable: Optional[bool] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> ControllerFactory:
    """Select the controller implementation for an orchestrator.

    ``cancellable`` overrides the probe when not ``None``.
    """
    supported = cancellation_supported() if cancellable is None else cancellable
    if supported:
        return AbortController
    return lambda: NoOpAbortController(logger=logger)


class InvocationCancellation:
    """Abort gate for a single invocation.

    Abort requests made before ``mark_started`` are silently dropped; once
    started, requests are forwarded to the controller, whose signal makes
    repeated requests no-ops.
    """

    def __init__(self, controller: AbortControllerLike) -> None:
        self._controller = controller
        self._started = False

    @property
    def signal(self) -> AbortSignal:
        return self._controller.signal

    @property
    def started(self) -> bool:
        return self._started

    def mark_started(self) -> None:
        self._started = True

    def abort(self, reason: str | None = None) -> None:
        """Forward an abort request once the invocation has started."""
        if self._started:
            self._controller.abort(reason)


__all__ = [
    "ControllerFactory",
    "InvocationCancellation",
    "cancellation_supported",
    "controller_factory",
]
