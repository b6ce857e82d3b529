"""Orchestrator options."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .context import GateAPI

Gate = Callable[[Any, GateAPI], Optional[bool]]


@dataclass(frozen=True)
class LifecycleOptions:
    """Optional behaviour of an orchestrator.

    Attributes:
        gate: Predicate run before starting; only a return value of exactly
            ``False`` skips the invocation.
        suppress_skip_dispatch: Keep skip events away from the sink (they are
            still returned through the handle).
        normalize_error: Serializer for Failed events; defaults to
            ``normalize_error``.
        generate_id: Request id generator; defaults to uuid4 strings.
        cancellable: Force (``True``) or disable (``False``) native
            cancellation; ``None`` defers to configuration.
        logger: Logger for lifecycle events; defaults to ``lifecycle.orchestrator``.
    """

    gate: Optional[Gate] = None
    suppress_skip_dispatch: bool = False
    normalize_error: Optional[Callable[[Any], Any]] = None
    generate_id: Optional[Callable[[], str]] = None
    cancellable: Optional[bool] = None
    logger: Optional[logging.Logger] = None


__all__ = ["Gate", "LifecycleOptions"]
