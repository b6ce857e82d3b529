"""Cancellation scenarios for lifecycle invocations.

Covers:
- Abort while the computation is pending settles as an aborted failure.
- Default abort reason and idempotent repeated aborts.
- The losing computation keeps running but its outcome is discarded.
- Abort requests before start (gate skip) and after settlement are no-ops.
- The fallback controller leaves the lifecycle untouched.
"""
from __future__ import annotations

import asyncio

import pytest

from async_lifecycle import AbortError, Failed, LifecycleError, Succeeded, create_lifecycle
from async_lifecycle.base.errors import FailureKind


def _blocking_computation(started: asyncio.Event, release: asyncio.Event, finished: list):
    async def compute(arg, api):
        started.set()
        await release.wait()
        finished.append(api.signal.aborted)
        return "late result"

    return compute


async def _abort_scenario(recorder, *reasons, **options):
    started = asyncio.Event()
    release = asyncio.Event()
    finished: list = []
    orch = create_lifecycle("jobs/slow", _blocking_computation(started, release, finished), **options)
    handle = orch("payload", dispatch=recorder)
    await started.wait()
    for reason in reasons:
        handle.abort(reason)
    if not reasons:
        handle.abort()
    if options.get("cancellable") is False:
        release.set()
    event = await handle
    release.set()
    for _ in range(3):
        await asyncio.sleep(0)
    return handle, event, finished


def test_abort_while_pending_settles_as_aborted(recorder):
    handle, event, finished = asyncio.run(_abort_scenario(recorder, "user cancelled"))

    assert isinstance(event, Failed)  # nosec B101 - pytest assert in tests
    assert event.aborted is True and event.rejected_with_value is False  # nosec B101
    assert event.condition_skipped is False  # nosec B101
    assert isinstance(event.error, AbortError)  # nosec B101
    assert event.serialized_error.name == "AbortError"  # nosec B101
    assert "user cancelled" in event.serialized_error.message  # nosec B101
    assert handle.signal.aborted is True  # nosec B101
    assert recorder.types == ["jobs/slow/pending", "jobs/slow/rejected"]  # nosec B101
    # orphaned computation ran to completion and observed the signal
    assert finished == [True]  # nosec B101


def test_abort_without_reason_uses_default(recorder):
    _, event, _ = asyncio.run(_abort_scenario(recorder))
    assert event.aborted is True  # nosec B101
    assert event.serialized_error.message == "Aborted"  # nosec B101


def test_repeated_abort_produces_single_terminal_event(recorder):
    _, event, _ = asyncio.run(_abort_scenario(recorder, "first", "second", "third"))
    assert event.serialized_error.message == "first"  # nosec B101
    assert recorder.types.count("jobs/slow/rejected") == 1  # nosec B101
    assert len(recorder.events) == 2  # nosec B101


def test_unwrap_after_abort_raises_aborted_lifecycle_error(recorder):
    async def scenario():
        never = asyncio.Event()

        async def compute(arg, api):
            await never.wait()

        handle = create_lifecycle("jobs/hang", compute)(None, dispatch=recorder)
        handle.abort("shutdown")
        with pytest.raises(LifecycleError) as info:
            await handle.unwrap()
        return info.value

    error = asyncio.run(scenario())
    assert error.kind is FailureKind.ABORTED and error.message == "shutdown"  # nosec B101
    assert isinstance(error.__cause__, AbortError)  # nosec B101


def test_abort_immediately_after_start_wins_race(recorder):
    ran = []

    async def compute(arg, api):
        ran.append(api.signal.aborted)
        return "done"

    async def scenario():
        handle = create_lifecycle("jobs/quick", compute)(1, dispatch=recorder)
        handle.abort("changed my mind")
        event = await handle
        await asyncio.sleep(0)
        return event

    event = asyncio.run(scenario())
    assert event.aborted is True  # nosec B101
    assert ran == [True]  # nosec B101
    assert recorder.types == ["jobs/quick/pending", "jobs/quick/rejected"]  # nosec B101


def test_abort_after_settlement_is_ignored(recorder):
    async def compute(arg, api):
        return arg

    async def scenario():
        handle = create_lifecycle("jobs/done", compute)(5, dispatch=recorder)
        event = await handle
        handle.abort("too late")
        await asyncio.sleep(0)
        return handle, event

    handle, event = asyncio.run(scenario())
    assert isinstance(event, Succeeded) and event.payload == 5  # nosec B101
    assert handle.result() is event  # nosec B101
    assert recorder.types == ["jobs/done/pending", "jobs/done/fulfilled"]  # nosec B101


def test_abort_before_start_is_a_noop(recorder):
    async def compute(arg, api):
        return arg

    async def scenario():
        handle = create_lifecycle("jobs/gated", compute, gate=lambda arg, api: False)(1, dispatch=recorder)
        handle.abort("ignored")
        return handle, await handle

    handle, event = asyncio.run(scenario())
    assert handle.signal.aborted is False  # nosec B101
    assert event.condition_skipped is True and event.aborted is False  # nosec B101


def test_fallback_controller_keeps_lifecycle(recorder, log_capture):
    handle, event, finished = asyncio.run(_abort_scenario(recorder, "stop", "stop again", cancellable=False))

    assert isinstance(event, Succeeded) and event.payload == "late result"  # nosec B101
    assert handle.signal.aborted is False and finished == [False]  # nosec B101
    assert len(log_capture.events("lifecycle.cancellation.unsupported")) == 1  # nosec B101


def test_env_flag_selects_fallback(monkeypatch, recorder):
    monkeypatch.setenv("LIFECYCLE_DISABLE_CANCELLATION", "true")

    async def compute(arg, api):
        await asyncio.sleep(0)
        return "kept"

    async def scenario():
        handle = create_lifecycle("jobs/env", compute)(None, dispatch=recorder)
        handle.abort()
        return await handle

    event = asyncio.run(scenario())
    assert isinstance(event, Succeeded) and event.payload == "kept"  # nosec B101


def test_orphan_failure_is_consumed_quietly(recorder, log_capture):
    async def scenario():
        release = asyncio.Event()

        async def compute(arg, api):
            await release.wait()
            raise RuntimeError("failed after abort")

        handle = create_lifecycle("jobs/orphan", compute)(None, dispatch=recorder)
        handle.abort()
        event = await handle
        release.set()
        for _ in range(3):
            await asyncio.sleep(0)
        return event

    event = asyncio.run(scenario())
    assert event.aborted is True  # nosec B101
    assert recorder.types == ["jobs/orphan/pending", "jobs/orphan/rejected"]  # nosec B101
    assert len(log_capture.events("lifecycle.abort")) == 1  # nosec B101
