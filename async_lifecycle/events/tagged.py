"""Tagged event descriptors.

``create_event_type`` pairs a type tag with a preparation function and
returns an :class:`EventType`: calling it builds an event, ``match`` tests
whether an arbitrary object carries the same tag. Matching is plain tag
equality so consumers can dispatch on ``event.type`` without holding the
descriptor.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

E = TypeVar("E")


class EventType(Generic[E]):
    """Constructor for events of a single tag."""

    __slots__ = ("type", "_prepare")

    def __init__(self, tag: str, prepare: Callable[..., E]) -> None:
        self.type = tag
        self._prepare = prepare

    def __call__(self, *args: Any, **kwargs: Any) -> E:
        return self._prepare(self.type, *args, **kwargs)

    def match(self, event: Any) -> bool:
        """Whether ``event`` carries this descriptor's tag."""
        return getattr(event, "type", None) == self.type

    def __str__(self) -> str:
        return self.type

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"EventType({self.type!r})"


def create_event_type(tag: str, prepare: Callable[..., E]) -> EventType[E]:
    """Return an :class:`EventType` for ``tag``.

    ``prepare`` receives the tag followed by the constructor's arguments and
    returns the event object.
    """
    return EventType(tag, prepare)


__all__ = ["EventType", "create_event_type"]
