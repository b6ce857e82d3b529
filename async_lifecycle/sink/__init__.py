"""Reference event sink."""

from .event_recorder import EventRecorder, Reducer, Subscriber

__all__ = ["EventRecorder", "Reducer", "Subscriber"]
