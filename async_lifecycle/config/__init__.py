"""Configuration layer for the lifecycle package.

Goals
-----
* Centralize defaults (log level, JSON logging, environment name).
* Resolve environment overrides once and cache the result.
* Refresh the cache transparently when a watched variable changes so tests
  can use ``monkeypatch.setenv`` without reaching into module state.

Environment Variables
---------------------
LIFECYCLE_LOG_LEVEL
    Logging level name for the shared ``lifecycle`` logger.
LIFECYCLE_JSON_LOGS
    ``0``/``false``/``no`` switches console output to plain text.
LIFECYCLE_ENV
    ``production`` silences the cancellation fallback diagnostic notice.
LIFECYCLE_DISABLE_CANCELLATION
    Truthy value forces orchestrators onto the no-op abort controller.

Public API
----------
* get_lifecycle_config() -> LifecycleConfig
* reset_lifecycle_config() -> None
"""
from __future__ import annotations

from dataclasses import dataclass
import os

from .defaults import (
    DEFAULT_CANCELLATION_DISABLED,
    DEFAULT_ENVIRONMENT,
    DEFAULT_JSON_LOGS,
    DEFAULT_LOG_LEVEL,
    ENV_DISABLE_CANCELLATION,
    ENV_ENVIRONMENT,
    ENV_JSON_LOGS,
    ENV_LOG_LEVEL,
    PRODUCTION_ENVIRONMENT,
)


@dataclass(frozen=True)
class LifecycleConfig:
    """Normalized lifecycle settings.

    Attributes:
        log_level: Level name applied to the shared logger.
        json_logs: Whether console output uses the JSON formatter.
        environment: Deployment environment name (lowercase).
        cancellation_disabled: Force the no-op abort controller.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = DEFAULT_JSON_LOGS
    environment: str = DEFAULT_ENVIRONMENT
    cancellation_disabled: bool = DEFAULT_CANCELLATION_DISABLED

    @property
    def diagnostics_enabled(self) -> bool:
        """Whether development-time diagnostic notices should be emitted."""
        return self.environment != PRODUCTION_ENVIRONMENT


_CACHED: LifecycleConfig | None = None
_ENV_GUARD: str | None = None
_WATCHED = (ENV_LOG_LEVEL, ENV_JSON_LOGS, ENV_ENVIRONMENT, ENV_DISABLE_CANCELLATION)


def _parse_env_bool(name: str, default: bool) -> bool:
    """Parse a boolean environment variable, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def get_lifecycle_config() -> LifecycleConfig:
    """Return the process-cached :class:`LifecycleConfig`.

    The cache is rebuilt when any watched environment variable differs from
    the values seen at the previous resolution.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    guard = "/".join(os.getenv(name, "") for name in _WATCHED)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    level = (os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    environment = (os.getenv(ENV_ENVIRONMENT) or DEFAULT_ENVIRONMENT).strip().lower()
    _CACHED = LifecycleConfig(
        log_level=level or DEFAULT_LOG_LEVEL,
        json_logs=_parse_env_bool(ENV_JSON_LOGS, DEFAULT_JSON_LOGS),
        environment=environment or DEFAULT_ENVIRONMENT,
        cancellation_disabled=_parse_env_bool(ENV_DISABLE_CANCELLATION, DEFAULT_CANCELLATION_DISABLED),
    )
    _ENV_GUARD = guard
    return _CACHED


def reset_lifecycle_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603
    _CACHED = None
    _ENV_GUARD = None


__all__ = ["LifecycleConfig", "get_lifecycle_config", "reset_lifecycle_config"]
