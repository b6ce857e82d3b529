"""
Exceptions raised when unwrapping a Failed lifecycle event.

``LifecycleError`` carries the serialized error of a thrown, aborted or
skipped invocation together with its correlation fields. Deliberate
rejections whose payload is not an exception surface as
``RejectedWithValueError`` so the payload stays reachable.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .failure_kind import FailureKind


@dataclass
class LifecycleError(Exception):
    """Structured failure raised by ``unwrap_result``.

    Attributes:
        kind: :class:`FailureKind` of the settled invocation.
        serialized: Output of the configured error serializer.
        type_prefix: Type prefix of the orchestrator that produced the event.
        request_id: Request id of the failed invocation.
        raw: Original failure value (also chained as ``__cause__`` when it is
            an exception).
    """

    kind: FailureKind
    serialized: Any
    type_prefix: Optional[str] = None
    request_id: Optional[str] = None
    raw: Any = None

    @property
    def message(self) -> str:
        text = getattr(self.serialized, "message", None)
        return text if isinstance(text, str) else str(self.serialized)

    @property
    def name(self) -> Optional[str]:
        text = getattr(self.serialized, "name", None)
        return text if isinstance(text, str) else None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.type_prefix or '-'}:{self.request_id or '-'} {self.kind.value}: {self.message}"


class RejectedWithValueError(Exception):
    """Raised for deliberate rejections whose payload is not an exception."""

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        super().__init__(payload)


__all__ = ["LifecycleError", "RejectedWithValueError"]
