"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from fixturekit import FixtureRegistry
from fixturekit.testing.plugin import fixture_registry, fixture_settings  # noqa: F401


@dataclass
class FixtureWidget:
    enabled: bool = True
    tags: list[str] = field(default_factory=list)


@pytest.fixture
def registry():
    """Fresh non-strict registry."""
    return FixtureRegistry(strict=False)


@pytest.fixture
def strict_registry():
    """Fresh registry validating declared return types."""
    return FixtureRegistry(strict=True)


@pytest.fixture
def widget_cls():
    return FixtureWidget


@pytest.fixture
def widget_registry(registry):
    """Registry with FixtureWidget and a 'disabled' state."""
    registry.register(FixtureWidget, FixtureWidget)
    registry.register_state(FixtureWidget, "disabled", lambda w: setattr(w, "enabled", False))
    return registry
