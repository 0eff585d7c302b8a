"""Configuration management for Breathwork."""

from breathwork.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from breathwork.core.config.models import (
    AppConfig,
    LoggingConfig,
    SessionConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "SessionConfig",
]
