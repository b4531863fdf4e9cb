"""Pytest plugin providing fixture registries.

Enable in a conftest.py:
    pytest_plugins = ["fixturekit.testing.plugin"]

Then:
    def test_disabled_widgets(fixture_registry):
        fixture_registry.register(Widget, Widget)
        ...
"""

from __future__ import annotations

import pytest

from fixturekit.config import FixtureSettings
from fixturekit.registry import FixtureRegistry


@pytest.fixture
def fixture_settings() -> FixtureSettings:
    """Settings for ``fixture_registry``. Override in a conftest to customize."""
    return FixtureSettings()


@pytest.fixture
def fixture_registry(fixture_settings: FixtureSettings) -> FixtureRegistry:
    """Fresh FixtureRegistry, isolated from other tests."""
    return FixtureRegistry(fixture_settings)
