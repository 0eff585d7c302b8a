"""Configuration models for Breathwork."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from breathwork.core.sequencer.models import SequencerConfig


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path (None = stdout)")


class SessionConfig(BaseModel):
    """Breathing session defaults."""

    model_config = ConfigDict(extra="forbid")

    pattern: SequencerConfig = Field(
        default_factory=SequencerConfig, description="Phase durations and cycle count"
    )

    # 0 ticks as fast as the event loop allows
    tick_interval_seconds: float = Field(
        default=1.0, ge=0.0, description="Wall-clock seconds per tick"
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility
    logging: LoggingConfig = LoggingConfig()
    session: SessionConfig = SessionConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("config.json")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, falling back to defaults when it is missing.

        Args:
            path: Path to config file, or None to use default_path()

        Returns:
            Loaded config with environment overrides applied

        Raises:
            ValidationError: If config is invalid
        """
        from breathwork.core.config.loader import load_app_config

        return load_app_config(path)  # type: ignore[return-value]
