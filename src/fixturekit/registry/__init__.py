"""Fixture registry.

Architecture Note:
    registry/ is the stateful entry point. It owns registrations and hands
    out Builders holding snapshots of them.
"""

from fixturekit.registry.registry import FixtureRegistry, get_registry

__all__ = [
    "FixtureRegistry",
    "get_registry",
]
