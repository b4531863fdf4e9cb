"""Collection of built fixtures."""

from fixturekit.collection.collection import Collection

__all__ = ["Collection"]
