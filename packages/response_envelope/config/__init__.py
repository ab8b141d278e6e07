"""Public API for response envelope configuration."""

from .loader import configure_logging_from_settings, load_config, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ENV_PREFIX,
    EnvelopeSettings,
    LoggingSettings,
    ProblemDetailsSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "EnvelopeSettings",
    "LoggingSettings",
    "ProblemDetailsSettings",
    "configure_logging_from_settings",
    "load_config",
    "load_settings",
]
