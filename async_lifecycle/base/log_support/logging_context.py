"""Structured logging context for lifecycle events.

:class:`LogContext` carries the correlation fields shared by every log line
of one invocation (type prefix, request id, request status) plus free-form
extras, and flattens them with ``to_dict`` while pruning ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for lifecycle logging events."""

    type_prefix: Optional[str] = None
    request_id: Optional[str] = None
    status: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_status(self, status: str) -> "LogContext":
        """Return a copy of this context with ``status`` replaced."""
        return replace(self, status=status, extra=dict(self.extra))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
