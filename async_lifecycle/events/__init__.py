"""Lifecycle events package.

Exposes the tagged event factory, the three lifecycle event variants and the
family builder under a single namespace.
"""

from .family import ErrorSerializer, LifecycleFamily, build_family
from .lifecycle_events import (
    Failed,
    FulfilledMeta,
    LifecycleEvent,
    PendingMeta,
    RejectedMeta,
    Started,
    Succeeded,
    TerminalEvent,
)
from .tagged import EventType, create_event_type

__all__ = [
    "ErrorSerializer",
    "EventType",
    "Failed",
    "FulfilledMeta",
    "LifecycleEvent",
    "LifecycleFamily",
    "PendingMeta",
    "RejectedMeta",
    "Started",
    "Succeeded",
    "TerminalEvent",
    "build_family",
    "create_event_type",
]
