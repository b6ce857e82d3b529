"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the abort signal, both controller implementations and the
per-invocation gate via the canonical ``async_lifecycle.base.cancellation``
import path, while the implementations live under ``cancellation_parts``.

Notes
-----
- ``AbortController`` is the native implementation; ``NoOpAbortController``
  is selected when cancellation is disabled and keeps the API surface intact.
- ``AbortError`` is the synthetic failure of an aborted invocation.
"""

from .cancellation_parts.abort_controller import AbortController
from .cancellation_parts.abort_error import AbortError, CancelledError
from .cancellation_parts.abort_signal import AbortListener, AbortSignal
from .cancellation_parts.controller_protocol import AbortControllerLike
from .cancellation_parts.invocation_cancellation import (
    ControllerFactory,
    InvocationCancellation,
    cancellation_supported,
    controller_factory,
)
from .cancellation_parts.noop_abort_controller import NoOpAbortController

__all__ = [
    "AbortController",
    "AbortControllerLike",
    "AbortError",
    "AbortListener",
    "AbortSignal",
    "CancelledError",
    "ControllerFactory",
    "InvocationCancellation",
    "NoOpAbortController",
    "cancellation_supported",
    "controller_factory",
]
