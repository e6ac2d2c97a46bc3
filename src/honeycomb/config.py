"""Lightweight configuration for the Honeycomb grid."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal grid settings."""

    model_config = SettingsConfigDict(
        env_prefix="HONEYCOMB_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    grid_radius: int = Field(
        default=8,
        description="Radius of the hexagonal grid; it holds 3n^2 + 3n + 1 cells",
        ge=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
