"""
Application settings.

Values come from environment variables prefixed ``TEMPERATURE_FUSION_``
(e.g. ``TEMPERATURE_FUSION_TARGET_UNIT=celsius``) or a local ``.env`` file.
Only the CLI and the report flow read settings; the conversion and fusion
functions take everything as arguments.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from temperature_fusion.schemas import TemperatureUnit


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPERATURE_FUSION_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "temperature-fusion"
    app_env: str = "development"
    debug: bool = False

    target_unit: TemperatureUnit = Field(
        default=TemperatureUnit.FAHRENHEIT,
        description="Unit every fused row is expressed in",
    )
    output_dir: Path = Field(default=Path("site"), description="Where reports are written")

    @field_validator("target_unit", mode="before")
    @classmethod
    def _lower_unit(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
