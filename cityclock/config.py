from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Transport settings. The city table is compiled in and not configurable here."""

    model_config = SettingsConfigDict(env_prefix="CITYCLOCK_", extra="ignore", populate_by_name=True)

    host: str = Field(default="0.0.0.0")
    port: int = Field(
        default=8000,
        ge=1,
        le=65_535,
        validation_alias=AliasChoices("CITYCLOCK_PORT", "PORT", "port"),
    )
    log_level: str = Field(default="info", pattern=r"^(critical|error|warning|info|debug)$")
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value):
        return value.lower() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
