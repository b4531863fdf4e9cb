"""Configuration module using Pydantic Settings.

Usage:
    from fixturekit.config import FixtureSettings

    settings = FixtureSettings(strict=True)
"""

from fixturekit.config.settings import FixtureSettings

__all__ = [
    "FixtureSettings",
]
