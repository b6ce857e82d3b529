"""Synchronous-style access to a terminal lifecycle event."""
from __future__ import annotations

from typing import Any

from ..base.errors import LifecycleError, RejectedWithValueError, classify_failure
from ..base.constants import REJECTED_SUFFIX
from ..events import Failed, Succeeded


def unwrap_result(event: Any) -> Any:
    """Return the result of a Succeeded event or raise for a Failed one.

    Raises:
        BaseException: The rejection payload itself, when the computation
            rejected with an exception value.
        RejectedWithValueError: For other deliberate rejections; the value is
            available as ``.payload``.
        LifecycleError: For thrown, aborted and skipped invocations, carrying
            the serialized error; the original failure is chained.
        TypeError: If ``event`` is not a terminal lifecycle event.
    """
    if isinstance(event, Succeeded):
        return event.payload
    if not isinstance(event, Failed):
        raise TypeError(f"expected a terminal lifecycle event, got {event!r}")
    if event.rejected_with_value:
        if isinstance(event.payload, BaseException):
            raise event.payload
        raise RejectedWithValueError(event.payload)
    error = LifecycleError(
        kind=classify_failure(event),
        serialized=event.serialized_error,
        type_prefix=event.type.removesuffix(REJECTED_SUFFIX),
        request_id=event.request_id,
        raw=event.error,
    )
    if isinstance(event.error, BaseException):
        raise error from event.error
    raise error


__all__ = ["unwrap_result"]
