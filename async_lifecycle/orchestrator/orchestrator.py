"""Lifecycle orchestrator.

Runs one invocation of a user computation through
``Created -> Gating -> Running -> Settled``:

1. allocate a request id and an abort controller;
2. evaluate the optional gate; an explicit ``False`` settles immediately
   with a condition-skip Failed event and no Started event;
3. mark the invocation started, emit Started, call the computation and race
   its result against the abort signal;
4. classify the winner and emit exactly one terminal event.

Steps 1-3 up to the computation call run synchronously inside
``Orchestrator.__call__``; the race and the terminal emission run in a task
on the current event loop. Failures of the gate, of the Started emission and
of the computation are converted into Failed events. Failures of the sink
while emitting the terminal event propagate through the handle.
"""
from __future__ import annotations

import asyncio
import dataclasses
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from ..base.cancellation import AbortError, AbortSignal, InvocationCancellation, controller_factory
from ..base.constants import STATUS_PENDING
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..events import Failed, LifecycleFamily, Succeeded, TerminalEvent, build_family
from .context import Dispatch, GateAPI, GetState, LifecycleAPI, RequestContext
from .handle import InvocationHandle
from .ids import generate_request_id
from .options import LifecycleOptions
from .outcome import Outcome, Skipped, Thrown, outcome_of_future, outcome_of_value, to_event

Computation = Callable[[Any, LifecycleAPI], Union[Any, Awaitable[Any]]]


def _identity_sink(event: Any) -> Any:
    return event


def _no_state() -> Any:
    return None


class Orchestrator:
    """Callable entry point created by :func:`create_lifecycle`.

    Calling it with an argument starts an invocation and returns its
    :class:`InvocationHandle`. The event family is exposed as ``pending``,
    ``fulfilled`` and ``rejected`` so sinks can recognize its events.
    """

    def __init__(self, type_prefix: str, computation: Computation, options: LifecycleOptions) -> None:
        self.type_prefix = type_prefix
        self.family: LifecycleFamily = build_family(type_prefix, options.normalize_error)
        self._computation = computation
        self._options = options
        self._generate_id = options.generate_id or generate_request_id
        self._logger = options.logger or get_logger("lifecycle.orchestrator")
        self._new_controller = controller_factory(options.cancellable, logger=self._logger)

    @property
    def pending(self):
        return self.family.pending

    @property
    def fulfilled(self):
        return self.family.fulfilled

    @property
    def rejected(self):
        return self.family.rejected

    @property
    def options(self) -> LifecycleOptions:
        return self._options

    def action(self, arg: Any) -> "LifecycleAction":
        """Defer an invocation until a sink runs it with its own environment."""
        return LifecycleAction(self, arg)

    def __call__(
        self,
        arg: Any = None,
        *,
        dispatch: Optional[Dispatch] = None,
        get_state: Optional[GetState] = None,
        extra: Any = None,
    ) -> InvocationHandle[Any]:
        """Start an invocation; must be called with a running event loop."""
        loop = asyncio.get_running_loop()
        dispatch = dispatch or _identity_sink
        get_state = get_state or _no_state

        request_id = self._generate_id()
        cancellation = InvocationCancellation(self._new_controller())
        context = RequestContext(request_id=request_id, arg=arg, signal=cancellation.signal)
        ctx = LogContext(type_prefix=self.type_prefix, request_id=request_id, status=STATUS_PENDING)

        try:
            if self._gate_rejects(arg, get_state, extra):
                return self._settle_now(loop, Skipped(), context, cancellation, dispatch, ctx)
            cancellation.mark_started()
            aborted = self._abort_future(loop, cancellation.signal, ctx)
            dispatch(self.family.pending(request_id, arg))
            normalized_log_event(self._logger, "lifecycle.start", ctx, phase="start")
            returned = self._computation(
                arg,
                LifecycleAPI(
                    dispatch=dispatch,
                    get_state=get_state,
                    extra=extra,
                    request_id=request_id,
                    signal=cancellation.signal,
                ),
            )
        except Exception as exc:  # noqa: BLE001 - every failure becomes a Failed event
            return self._settle_now(loop, Thrown(exc), context, cancellation, dispatch, ctx)

        task = loop.create_task(self._race(returned, aborted, context, dispatch, ctx))
        return InvocationHandle(task, cancellation, request_id, arg)

    # Gating ----------------------------------------------------------------
    def _gate_rejects(self, arg: Any, get_state: GetState, extra: Any) -> bool:
        gate = self._options.gate
        return gate is not None and gate(arg, GateAPI(get_state=get_state, extra=extra)) is False

    # Running ---------------------------------------------------------------
    def _abort_future(self, loop: asyncio.AbstractEventLoop, signal: AbortSignal, ctx: LogContext) -> "asyncio.Future[AbortError]":
        aborted: "asyncio.Future[AbortError]" = loop.create_future()

        def _on_abort(sig: AbortSignal) -> None:
            if aborted.done():
                return
            aborted.set_result(AbortError(sig.reason))
            log_event(self._logger, "lifecycle.abort", ctx, reason=sig.reason)

        signal.add_listener(_on_abort)
        return aborted

    async def _race(
        self,
        returned: Any,
        aborted: "asyncio.Future[AbortError]",
        context: RequestContext,
        dispatch: Dispatch,
        ctx: LogContext,
    ) -> TerminalEvent:
        outcome = await self._first_outcome(returned, aborted, ctx)
        return self._finish(outcome, context, dispatch, ctx)

    async def _first_outcome(self, returned: Any, aborted: "asyncio.Future[AbortError]", ctx: LogContext) -> Outcome:
        if not inspect.isawaitable(returned):
            if aborted.done():
                return Thrown(aborted.result(), aborted=True)
            aborted.cancel()
            return outcome_of_value(returned)

        try:
            computation = asyncio.ensure_future(returned)
        except Exception as exc:  # noqa: BLE001
            aborted.cancel()
            return Thrown(exc)

        await asyncio.wait({computation, aborted}, return_when=asyncio.FIRST_COMPLETED)
        if aborted.done() and not aborted.cancelled():
            computation.add_done_callback(lambda fut: self._discard_orphan(fut, ctx))
            return Thrown(aborted.result(), aborted=True)
        aborted.cancel()
        return outcome_of_future(computation)

    def _discard_orphan(self, future: "asyncio.Future[Any]", ctx: LogContext) -> None:
        """Consume the outcome of a computation that lost the race to an abort."""
        if future.cancelled():
            return
        error = future.exception()
        log_event(
            self._logger,
            "lifecycle.orphan_settled",
            ctx,
            level=logging.DEBUG,
            error=repr(error) if error is not None else None,
        )

    # Settled ---------------------------------------------------------------
    def _settle_now(
        self,
        loop: asyncio.AbstractEventLoop,
        outcome: Outcome,
        context: RequestContext,
        cancellation: InvocationCancellation,
        dispatch: Dispatch,
        ctx: LogContext,
    ) -> InvocationHandle[Any]:
        future: "asyncio.Future[TerminalEvent]" = loop.create_future()
        try:
            future.set_result(self._finish(outcome, context, dispatch, ctx))
        except Exception as exc:  # noqa: BLE001 - sink failures surface through the handle
            future.set_exception(exc)
        return InvocationHandle(future, cancellation, context.request_id, context.arg)

    def _finish(self, outcome: Outcome, context: RequestContext, dispatch: Dispatch, ctx: LogContext) -> TerminalEvent:
        event = to_event(outcome, self.family, context.request_id, context.arg)
        self._log_settled(event, ctx)
        skip_dispatch = (
            self._options.suppress_skip_dispatch
            and isinstance(event, Failed)
            and event.condition_skipped
        )
        if not skip_dispatch:
            dispatch(event)
        return event

    def _log_settled(self, event: Union[Succeeded, Failed], ctx: LogContext) -> None:
        settled = ctx.with_status(event.request_status)
        if isinstance(event, Succeeded):
            normalized_log_event(self._logger, "lifecycle.settle", settled, phase="settle")
            return
        normalized_log_event(
            self._logger,
            "lifecycle.skip" if event.condition_skipped else "lifecycle.settle",
            settled,
            phase="skip" if event.condition_skipped else "settle",
            aborted=event.aborted,
            condition=event.condition_skipped,
            rejected_with_value=event.rejected_with_value,
            error_name=getattr(event.serialized_error, "name", None),
            error_message=getattr(event.serialized_error, "message", None),
        )

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Orchestrator({self.type_prefix!r})"


@dataclass(frozen=True)
class LifecycleAction:
    """Deferred invocation runnable by a sink with its own environment."""

    orchestrator: Orchestrator
    arg: Any

    def __call__(self, dispatch: Dispatch, get_state: Optional[GetState] = None, extra: Any = None) -> InvocationHandle[Any]:
        return self.orchestrator(self.arg, dispatch=dispatch, get_state=get_state, extra=extra)


def create_lifecycle(
    type_prefix: str,
    computation: Computation,
    options: Optional[LifecycleOptions] = None,
    **overrides: Any,
) -> Orchestrator:
    """Create an orchestrator for ``computation`` under ``type_prefix``.

    Options may be given as a :class:`LifecycleOptions` instance, as keyword
    arguments, or both (keywords win).

    Example::

        fetch_user = create_lifecycle("users/fetch", load_user, gate=not_cached)
        event = await fetch_user(42, dispatch=store.dispatch, get_state=store.get_state)
    """
    base = options or LifecycleOptions()
    resolved = dataclasses.replace(base, **overrides) if overrides else base
    return Orchestrator(type_prefix, computation, resolved)


__all__ = ["Computation", "LifecycleAction", "Orchestrator", "create_lifecycle"]
