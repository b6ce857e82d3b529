"""
Synthetic failure describing a condition skip.

Never raised by the orchestrator; it only feeds the error serializer so a
skipped invocation's Failed event carries a descriptive serialized error.
"""
from __future__ import annotations

from ..constants import CONDITION_ERROR_NAME, CONDITION_SKIP_MESSAGE


class ConditionError(Exception):
    """Invocation skipped because its gate returned ``False``."""

    name = CONDITION_ERROR_NAME

    def __init__(self, message: str = CONDITION_SKIP_MESSAGE) -> None:
        self.message = message
        super().__init__(message)


__all__ = ["ConditionError"]
