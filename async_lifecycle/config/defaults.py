"""Default values for lifecycle configuration.

Kept separate from the resolution logic in ``async_lifecycle.config`` so the
defaults can be imported without triggering environment parsing.
"""
from __future__ import annotations

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_JSON_LOGS = True
DEFAULT_ENVIRONMENT = "development"
PRODUCTION_ENVIRONMENT = "production"
DEFAULT_CANCELLATION_DISABLED = False

# Environment variable names
ENV_LOG_LEVEL = "LIFECYCLE_LOG_LEVEL"
ENV_JSON_LOGS = "LIFECYCLE_JSON_LOGS"
ENV_ENVIRONMENT = "LIFECYCLE_ENV"
ENV_DISABLE_CANCELLATION = "LIFECYCLE_DISABLE_CANCELLATION"

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_JSON_LOGS",
    "DEFAULT_ENVIRONMENT",
    "PRODUCTION_ENVIRONMENT",
    "DEFAULT_CANCELLATION_DISABLED",
    "ENV_LOG_LEVEL",
    "ENV_JSON_LOGS",
    "ENV_ENVIRONMENT",
    "ENV_DISABLE_CANCELLATION",
]
