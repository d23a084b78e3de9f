"""
Configuration management for exprbuf.

Settings come from environment variables (``EXPRBUF_`` prefix) or an optional
``.env`` file, with defaults matching the calculator's standard behaviour.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from exprbuf.core.math.formatting import (
    DEFAULT_PRECISION,
    MAX_PRECISION,
    FormatConfig,
    RoundingMode,
)


class Settings(BaseSettings):
    """Main engine settings."""

    model_config = SettingsConfigDict(
        env_prefix="EXPRBUF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Result formatting
    result_precision: int = Field(default=DEFAULT_PRECISION, ge=0, le=MAX_PRECISION)
    rounding: RoundingMode = RoundingMode.HALF_UP

    def format_config(self) -> FormatConfig:
        return FormatConfig(precision=self.result_precision, rounding=self.rounding)


# Global settings instance
settings = Settings()
