"""Tests for the pytest plugin fixtures."""

from dataclasses import dataclass

import pytest

from fixturekit import FixtureRegistry, FixtureSettings


@dataclass
class Beacon:
    lit: bool = False


def test_fixture_registry_is_fresh(fixture_registry):
    assert isinstance(fixture_registry, FixtureRegistry)
    assert len(fixture_registry) == 0

    fixture_registry.register(Beacon, Beacon)


def test_fixture_registry_not_shared_between_tests(fixture_registry):
    assert not fixture_registry.has(Beacon)


class TestStrictSettings:
    @pytest.fixture
    def fixture_settings(self):
        return FixtureSettings(strict=True)

    def test_settings_fixture_can_be_overridden(self, fixture_registry):
        assert fixture_registry.strict
