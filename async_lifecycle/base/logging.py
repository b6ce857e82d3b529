"""Structured logging utilities for the lifecycle layer.

Rationale:
- One place configures JSON (or plain) logging for every lifecycle module.
- Child loggers propagate to the shared ``lifecycle`` logger; only the base
  logger owns a console handler, so records are never emitted twice.

``log_event`` is the base primitive: it serializes an event name, the
invocation's :class:`LogContext` and arbitrary fields as one JSON line.
``normalized_log_event`` wraps it and guarantees the canonical keys
``phase``, ``status``, ``aborted``, ``condition`` and ``rejected_with_value``
so downstream filters work regardless of which code path emitted the line.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from ..config import get_lifecycle_config
from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "lifecycle"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_lifecycle_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_lifecycle_console_handler"
_FILE_HANDLER_ATTR = "_lifecycle_file_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name case-insensitively, falling back to ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _new_console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool | None = None) -> logging.Logger:
    """Initialize (or refresh) and return the shared ``lifecycle`` logger.

    The console handler is re-pointed at the current ``sys.stderr`` on every
    call; capture tools swap the stream between tests.
    """
    cfg = get_lifecycle_config()
    json_mode = cfg.json_logs if json_mode is None else json_mode
    level = _parse_level(cfg.log_level)
    logger = logging.getLogger(BASE_LOGGER_NAME)

    if not getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(level)
        logger.handlers[:] = [_new_console_handler(json_mode, level)]
        logger.propagate = False
        setattr(logger, _BASE_LOGGER_ATTR, True)
        return logger

    if logger.level != level:
        logger.setLevel(level)
    for existing in list(logger.handlers):
        if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
            continue
        stream = getattr(existing, "stream", None)
        if stream is None or getattr(stream, "closed", False):
            logger.removeHandler(existing)
            with contextlib.suppress(Exception):
                existing.close()
            logger.addHandler(_new_console_handler(json_mode, level))
            continue
        existing.setLevel(level)
        if isinstance(existing, logging.StreamHandler) and stream is not sys.stderr:
            existing.setStream(sys.stderr)
        if json_mode != isinstance(existing.formatter, JsonFormatter):
            existing.setFormatter(_formatter(json_mode))
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool | None = None) -> logging.Logger:
    """Return ``name`` as a child of the shared lifecycle logger.

    Names outside the ``lifecycle.`` namespace are nested under it so their
    records reach the managed handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared lifecycle logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Numeric level or level name. ``None`` keeps the current level.
    file_path: Optional[str]
        When provided, attach (or reuse) a rotating file handler writing to
        this path. When ``None``, remove any file handler this module added.
    json_mode: bool
        Formatter choice for the file handler.

    Returns
    -------
    logging.Logger
        The shared ``lifecycle`` logger.
    """
    logger = _ensure_base_logger()
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for handler in logger.handlers:
            handler.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for handler in managed:
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for handler in managed:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == abs_path:
            existing = handler
        else:
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()

    if existing is None:
        # 10MB x 5 backups
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from ``get_logger``.
    event: str
        Event name (e.g. ``lifecycle.start``).
    ctx: LogContext | None
        Invocation context; merged shallowly into the payload.
    level: int
        Logging level for the record.
    keep_none: bool
        Preserve keys whose values are ``None`` instead of dropping them.
    **fields: Any
        Additional key/value pairs; non-JSON values are rendered with ``repr``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=repr))


REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "status",
    "aborted",
    "condition",
    "rejected_with_value",
)


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    status: str | None = None,
    aborted: bool = False,
    condition: bool = False,
    rejected_with_value: bool = False,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a lifecycle log event carrying the canonical outcome keys.

    ``status`` defaults to the context's status. Extra fields never overwrite
    the canonical keys.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "status": status if status is not None else (ctx.status if ctx else None),
        "aborted": aborted,
        "condition": condition,
        "rejected_with_value": rejected_with_value,
    }
    for key, value in extra_fields.items():
        if value is None or key in base_fields:
            continue
        base_fields[key] = value
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
