"""Unit tests for ``unwrap_result`` and failure classification."""
from __future__ import annotations

import pytest

from async_lifecycle.base.errors import (
    AbortError,
    FailureKind,
    LifecycleError,
    RejectedWithValueError,
    classify_failure,
)
from async_lifecycle.events import build_family
from async_lifecycle.orchestrator import unwrap_result

FAMILY = build_family("orders/place")


def test_unwrap_success_returns_payload():
    assert unwrap_result(FAMILY.fulfilled("ok", "r", None)) == "ok"  # nosec B101 - pytest assert in tests


def test_unwrap_rejected_value_raises_raw_payload():
    event = FAMILY.rejected(None, "r", None, payload=7, rejected_with_value=True)
    with pytest.raises(RejectedWithValueError) as info:
        unwrap_result(event)
    assert info.value.payload == 7  # nosec B101


def test_unwrap_rejected_exception_payload_is_raised_directly():
    payload = KeyError("sku")
    event = FAMILY.rejected(None, "r", None, payload=payload, rejected_with_value=True)
    with pytest.raises(KeyError) as info:
        unwrap_result(event)
    assert info.value is payload  # nosec B101


def test_unwrap_thrown_raises_serialized_error_chained_to_original():
    original = ValueError("boom")
    event = FAMILY.rejected(original, "r-1", None)
    with pytest.raises(LifecycleError) as info:
        unwrap_result(event)
    err = info.value
    assert err.kind is FailureKind.THROWN  # nosec B101
    assert err.serialized is event.serialized_error  # nosec B101
    assert err.message == "boom" and err.name == "ValueError"  # nosec B101
    assert err.__cause__ is original and err.raw is original  # nosec B101
    assert err.type_prefix == "orders/place" and err.request_id == "r-1"  # nosec B101


def test_unwrap_skip_has_no_cause():
    event = FAMILY.rejected(None, "r", None, condition=True)
    with pytest.raises(LifecycleError) as info:
        unwrap_result(event)
    assert info.value.kind is FailureKind.CONDITION  # nosec B101
    assert info.value.__cause__ is None  # nosec B101


def test_unwrap_rejects_non_terminal_events():
    with pytest.raises(TypeError):
        unwrap_result(FAMILY.pending("r", None))


def test_classify_failure_precedence():
    assert classify_failure(FAMILY.rejected(None, "r", 1, condition=True)) is FailureKind.CONDITION  # nosec B101
    assert classify_failure(FAMILY.rejected(AbortError(), "r", 1, aborted=True)) is FailureKind.ABORTED  # nosec B101
    valued = FAMILY.rejected(None, "r", 1, payload=1, rejected_with_value=True)
    assert classify_failure(valued) is FailureKind.REJECTED_WITH_VALUE  # nosec B101
    assert classify_failure(FAMILY.rejected(OSError("x"), "r", 1)) is FailureKind.THROWN  # nosec B101
    with pytest.raises(ValueError):
        classify_failure(FAMILY.fulfilled(1, "r", 1))


def test_classify_failure_requires_rejected_status():
    with pytest.raises(ValueError):
        classify_failure(FAMILY.pending("r", 1))
