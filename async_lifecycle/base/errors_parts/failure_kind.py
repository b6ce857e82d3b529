"""
Failure kinds of a settled invocation (taxonomy).

Every non-successful invocation settles as a single Failed event; the kind
tells consumers which of the four designed paths produced it. Values are
lowercase snake_case and form a stable contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Enumerated failure categories of a Failed lifecycle event."""

    CONDITION = "condition"
    ABORTED = "aborted"
    REJECTED_WITH_VALUE = "rejected_with_value"
    THROWN = "thrown"


__all__ = ["FailureKind"]
