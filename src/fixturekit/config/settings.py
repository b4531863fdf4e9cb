"""Configuration settings using Pydantic Settings.

Usage:
    from fixturekit.config import FixtureSettings

    # Load from environment variables (FIXTUREKIT_*)
    settings = FixtureSettings()

    # Or override with explicit values
    settings = FixtureSettings(strict=True, random_seed=42)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FixtureSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for fixture registries.

    Attributes:
        strict: Validate declared return types of constructors and states
            when they are registered.
        random_seed: Seed for the random source handed to collections, so
            ``Collection.random()`` is reproducible. None uses the module RNG.

    Environment Variables:
        FIXTUREKIT_STRICT
        FIXTUREKIT_RANDOM_SEED
    """

    model_config = SettingsConfigDict(
        env_prefix="FIXTUREKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = False
    random_seed: int | None = Field(default=None, ge=0)
