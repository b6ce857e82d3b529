"""Internal resolution of a computation's result.

An invocation settles into exactly one :data:`Outcome`; ``to_event`` turns
it into the terminal lifecycle event. Classifying a returned value happens
once, in :func:`outcome_of_value`, so the rest of the orchestrator only
deals with the tagged union.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Union

from ..base.errors_parts.reject_with_value import RejectWithValue
from ..events import Failed, LifecycleFamily, Succeeded


@dataclass(frozen=True)
class Success:
    value: Any


@dataclass(frozen=True)
class Rejected:
    payload: Any


@dataclass(frozen=True)
class Thrown:
    error: BaseException
    aborted: bool = False


@dataclass(frozen=True)
class Skipped:
    pass


Outcome = Union[Success, Rejected, Thrown, Skipped]


def outcome_of_value(value: Any) -> Outcome:
    """Classify a value produced by a computation."""
    if isinstance(value, RejectWithValue):
        return Rejected(value.payload)
    return Success(value)


def outcome_of_future(future: "asyncio.Future[Any]") -> Outcome:
    """Classify a settled computation future."""
    if future.cancelled():
        return Thrown(asyncio.CancelledError())
    error = future.exception()
    if error is not None:
        return Thrown(error)
    return outcome_of_value(future.result())


def to_event(outcome: Outcome, family: LifecycleFamily, request_id: str, arg: Any) -> Union[Succeeded, Failed]:
    """Build the terminal event for ``outcome``."""
    if isinstance(outcome, Success):
        return family.fulfilled(outcome.value, request_id, arg)
    if isinstance(outcome, Rejected):
        return family.rejected(None, request_id, arg, payload=outcome.payload, rejected_with_value=True)
    if isinstance(outcome, Thrown):
        return family.rejected(outcome.error, request_id, arg, aborted=outcome.aborted)
    return family.rejected(None, request_id, arg, condition=True)


__all__ = [
    "Outcome",
    "Rejected",
    "Skipped",
    "Success",
    "Thrown",
    "outcome_of_future",
    "outcome_of_value",
    "to_event",
]
