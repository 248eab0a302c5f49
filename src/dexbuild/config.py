"""
Application settings.

Values are read from ``DEXBUILD_*`` environment variables (or a ``.env``
file) and fall back to the defaults below, which reproduce the standard
national-dex build.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for a dataset build."""

    model_config = SettingsConfigDict(env_prefix="DEXBUILD_", env_file=".env", extra="ignore")

    app_name: str = "dexbuild"
    debug: bool = False

    # --- Upstream (PokeAPI) ---
    api_base_url: str = "https://pokeapi.co/api/v2"
    user_agent: str = "pokemon-calc-builder"
    http_timeout: float = 30.0

    # --- Dataset shape ---
    max_id: int = Field(default=1025, ge=1, description="Highest national dex id to fetch")
    # Preferred language codes, in order. Unmatched names fall back to English.
    ko_name_languages: list[str] = Field(default_factory=lambda: ["ko", "ko-kr"])
    jp_name_languages: list[str] = Field(default_factory=lambda: ["ja-Hrkt", "ja"])
    ability_languages: list[str] = Field(default_factory=lambda: ["ko"])
    generations: list[str] = Field(default_factory=lambda: ["gen6", "gen7", "gen8", "gen9"])

    # --- Paths ---
    output_dir: Path = Path("src/data")
    patch_dir: Path = Path("patches")

    # --- Pacing and retry ---
    retry_attempts: int = Field(default=1, ge=0)
    pacing_seconds: float = Field(default=0.08, ge=0)
    backoff_seconds: float = Field(default=0.5, ge=0)
    ability_delay_seconds: float = Field(default=0.04, ge=0)
    progress_every: int = Field(default=50, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
