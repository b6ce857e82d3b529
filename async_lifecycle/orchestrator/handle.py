"""Caller-facing handle of one invocation."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Generator, Generic, TypeVar

from ..base.cancellation import InvocationCancellation
from ..events import TerminalEvent
from .unwrap import unwrap_result

R = TypeVar("R")


class InvocationHandle(Generic[R]):
    """Awaitable resolving to the terminal event of an invocation.

    Besides awaiting, callers can ``abort`` the invocation, read its
    ``request_id``/``arg`` and ``unwrap`` the outcome.
    """

    def __init__(
        self,
        future: "asyncio.Future[TerminalEvent]",
        cancellation: InvocationCancellation,
        request_id: str,
        arg: Any,
    ) -> None:
        self._future = future
        self._cancellation = cancellation
        self.request_id = request_id
        self.arg = arg

    def __await__(self) -> Generator[Any, None, TerminalEvent]:
        return self._future.__await__()

    def abort(self, reason: str | None = None) -> None:
        """Request cancellation; ignored before start and after the first abort."""
        self._cancellation.abort(reason)

    async def unwrap(self) -> R:
        """Await the terminal event and return its result or raise its failure."""
        return unwrap_result(await self._future)

    @property
    def signal(self):
        return self._cancellation.signal

    def done(self) -> bool:
        return self._future.done()

    def result(self) -> TerminalEvent:
        """Return the terminal event; raises ``asyncio.InvalidStateError`` if unsettled."""
        return self._future.result()

    def add_done_callback(self, callback: Callable[["asyncio.Future[TerminalEvent]"], Any]) -> None:
        self._future.add_done_callback(callback)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        state = "done" if self._future.done() else "pending"
        return f"InvocationHandle(request_id={self.request_id!r}, {state})"


__all__ = ["InvocationHandle"]
