"""Lifecycle event value objects.

Three immutable variants share a ``type`` tag and a ``meta`` block carrying
the invocation's ``arg`` and ``request_id``:

- :class:`Started` (``request_status == "pending"``)
- :class:`Succeeded` (``"fulfilled"``), payload is the computation result
- :class:`Failed` (``"rejected"``), payload is the rejection value when the
  computation rejected deliberately
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

from ..base.constants import STATUS_FULFILLED, STATUS_PENDING, STATUS_REJECTED


@dataclass(frozen=True)
class PendingMeta:
    arg: Any
    request_id: str
    request_status: Literal["pending"] = STATUS_PENDING


@dataclass(frozen=True)
class FulfilledMeta:
    arg: Any
    request_id: str
    request_status: Literal["fulfilled"] = STATUS_FULFILLED


@dataclass(frozen=True)
class RejectedMeta:
    """Meta of a Failed event; ``condition`` marks a gate skip."""

    arg: Any
    request_id: str
    rejected_with_value: bool = False
    aborted: bool = False
    condition: bool = False
    request_status: Literal["rejected"] = STATUS_REJECTED


@dataclass(frozen=True)
class _LifecycleEvent:
    @property
    def request_id(self) -> str:
        return self.meta.request_id  # type: ignore[attr-defined]

    @property
    def arg(self) -> Any:
        return self.meta.arg  # type: ignore[attr-defined]

    @property
    def request_status(self) -> str:
        return self.meta.request_status  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Started(_LifecycleEvent):
    type: str
    meta: PendingMeta
    payload: None = None


@dataclass(frozen=True)
class Succeeded(_LifecycleEvent):
    type: str
    payload: Any
    meta: FulfilledMeta


@dataclass(frozen=True)
class Failed(_LifecycleEvent):
    """Terminal failure of an invocation.

    ``error`` is the original failure (exception or synthetic abort) and is
    ``None`` for deliberate rejections and gate skips; ``serialized_error``
    is always populated.
    """

    type: str
    payload: Any
    error: Optional[BaseException]
    serialized_error: Any
    meta: RejectedMeta

    @property
    def rejected_with_value(self) -> bool:
        return self.meta.rejected_with_value

    @property
    def aborted(self) -> bool:
        return self.meta.aborted

    @property
    def condition_skipped(self) -> bool:
        return self.meta.condition


LifecycleEvent = Union[Started, Succeeded, Failed]
TerminalEvent = Union[Succeeded, Failed]

__all__ = [
    "PendingMeta",
    "FulfilledMeta",
    "RejectedMeta",
    "Started",
    "Succeeded",
    "Failed",
    "LifecycleEvent",
    "TerminalEvent",
]
