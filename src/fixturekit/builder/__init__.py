"""Builder and construction pipeline."""

from fixturekit.builder.builder import Builder

__all__ = ["Builder"]
