"""Pytest configuration for the lifecycle test suite.

Provides a recording sink, structured log capture on the shared
``lifecycle`` logger, and isolation of the cached configuration and the
process-wide fallback notice flag between tests.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from async_lifecycle.base.cancellation import NoOpAbortController
from async_lifecycle.base.logging import get_logger
from async_lifecycle.config import reset_lifecycle_config
from async_lifecycle.sink import EventRecorder


@pytest.fixture(autouse=True)
def isolated_lifecycle_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear lifecycle env overrides, the config cache and the notice flag."""
    for name in (
        "LIFECYCLE_LOG_LEVEL",
        "LIFECYCLE_JSON_LOGS",
        "LIFECYCLE_ENV",
        "LIFECYCLE_DISABLE_CANCELLATION",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(NoOpAbortController, "_notice_shown", False)
    reset_lifecycle_config()
    yield
    reset_lifecycle_config()


@pytest.fixture()
def recorder() -> EventRecorder:
    return EventRecorder()


class _Capture:
    """Collected log records with a helper to decode JSON payloads."""

    def __init__(self) -> None:
        self.records: List[logging.LogRecord] = []

    def payloads(self) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for record in self.records:
            try:
                out.append(json.loads(record.getMessage()))
            except ValueError:
                continue
        return out

    def events(self, name: str) -> List[Dict[str, Any]]:
        return [p for p in self.payloads() if p.get("event") == name]


@pytest.fixture()
def log_capture() -> Iterator[_Capture]:
    capture = _Capture()
    handler = logging.Handler()
    handler.emit = capture.records.append  # type: ignore[method-assign]
    base = get_logger()
    base.addHandler(handler)
    try:
        yield capture
    finally:
        base.removeHandler(handler)
