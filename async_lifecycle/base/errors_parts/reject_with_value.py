"""
Rejection marker returned by computations that reject deliberately.

A computation signals a domain-level rejection by returning (not raising)
``RejectWithValue(payload)``; the orchestrator settles such invocations as
Failed events with ``rejected_with_value=True`` and the payload preserved.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from ..constants import REJECT_WITH_VALUE_NAME, REJECTED_FALLBACK_MESSAGE

V = TypeVar("V")


@dataclass(frozen=True)
class RejectWithValue(Generic[V]):
    """Wrapper distinguishing a deliberate rejection from a plain result."""

    name: ClassVar[str] = REJECT_WITH_VALUE_NAME
    message: ClassVar[str] = REJECTED_FALLBACK_MESSAGE

    payload: V


def reject_with_value(value: V) -> RejectWithValue[V]:
    """Wrap ``value`` as a deliberate rejection."""
    return RejectWithValue(value)


__all__ = ["RejectWithValue", "reject_with_value"]
