"""Unit tests for the tagged event factory and the lifecycle event family."""
from __future__ import annotations

from async_lifecycle.base.errors import AbortError, SerializedError
from async_lifecycle.events import (
    Failed,
    Started,
    Succeeded,
    build_family,
    create_event_type,
)


def test_create_event_type_builds_and_matches():
    ping = create_event_type("net/ping", lambda tag, host: {"type": tag, "host": host})
    event = ping("example.org")
    assert event == {"type": "net/ping", "host": "example.org"}  # nosec B101 - pytest assert in tests
    assert ping.type == "net/ping"  # nosec B101
    assert ping.match(Started(type="net/ping", meta=None)) is True  # type: ignore[arg-type]  # nosec B101
    assert ping.match(object()) is False  # nosec B101


def test_family_tags_and_meta():
    family = build_family("todos/load")
    assert family.pending.type == "todos/load/pending"  # nosec B101
    assert family.fulfilled.type == "todos/load/fulfilled"  # nosec B101
    assert family.rejected.type == "todos/load/rejected"  # nosec B101

    started = family.pending("r1", {"page": 1})
    assert isinstance(started, Started)  # nosec B101
    assert (started.request_id, started.arg, started.request_status) == ("r1", {"page": 1}, "pending")  # nosec B101
    assert started.payload is None  # nosec B101

    done = family.fulfilled(["a"], "r1", {"page": 1})
    assert isinstance(done, Succeeded) and done.payload == ["a"]  # nosec B101
    assert done.meta.request_status == "fulfilled"  # nosec B101


def test_match_discriminates_between_phases_and_families():
    family = build_family("a")
    other = build_family("b")
    started = family.pending("r", None)
    assert family.pending.match(started) is True  # nosec B101
    assert family.fulfilled.match(started) is False  # nosec B101
    assert other.pending.match(started) is False  # nosec B101


def test_phase_table_lookup():
    family = build_family("jobs")
    assert family.phase_of(family.pending("r", 1)) == "pending"  # nosec B101
    assert family.phase_of(family.fulfilled(2, "r", 1)) == "fulfilled"  # nosec B101
    assert family.phase_of(family.rejected(ValueError("x"), "r", 1)) == "rejected"  # nosec B101
    assert family.phase_of(build_family("other").pending("r", 1)) is None  # nosec B101
    assert family.owns(object()) is False  # nosec B101


def test_rejected_flags_and_serialization():
    family = build_family("jobs")
    thrown = family.rejected(ValueError("boom"), "r", 1)
    assert isinstance(thrown, Failed)  # nosec B101
    assert thrown.serialized_error.to_dict() == {"name": "ValueError", "message": "boom"}  # nosec B101
    assert (thrown.rejected_with_value, thrown.aborted, thrown.condition_skipped) == (False, False, False)  # nosec B101
    assert thrown.payload is None  # nosec B101

    aborted = family.rejected(AbortError("bye"), "r", 1, aborted=True)
    assert aborted.aborted is True and aborted.serialized_error.message == "bye"  # nosec B101

    skipped = family.rejected(None, "r", 1, condition=True)
    assert skipped.condition_skipped is True and skipped.error is None  # nosec B101
    assert skipped.serialized_error.name == "ConditionError"  # nosec B101

    valued = family.rejected(None, "r", 1, payload={"why": "no"}, rejected_with_value=True)
    assert valued.payload == {"why": "no"}  # nosec B101
    assert valued.serialized_error.to_dict() == {"message": "Rejected"}  # nosec B101


def test_custom_serializer_is_used():
    family = build_family("jobs", serialize_error=lambda value: SerializedError(code="CUSTOM"))
    event = family.rejected(RuntimeError("x"), "r", 1)
    assert event.serialized_error.to_dict() == {"code": "CUSTOM"}  # nosec B101
