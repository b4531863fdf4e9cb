"""Tests for error messages and hierarchy."""

from dataclasses import dataclass

import pytest

from fixturekit.core.errors import (
    DuplicateRegistration,
    EmptyCollection,
    FixtureError,
    InvalidOffset,
    InvalidValue,
    OffsetNotFound,
    UnknownState,
    UnknownType,
    UnresolvedReturnType,
    type_name,
)


@dataclass
class Sprocket:
    teeth: int = 12


def test_type_name_is_qualified():
    assert type_name(Sprocket).endswith(".Sprocket")
    assert type_name("not-a-class") == "'not-a-class'"


def test_unknown_state_lists_every_missing_name():
    error = UnknownState(Sprocket, "rusty", "bent")

    assert error.missing == ("rusty", "bent")
    assert error.entity_type is Sprocket
    assert "[rusty bent]" in str(error)
    assert "Sprocket" in str(error)


def test_duplicate_registration_message_names_state():
    assert "Factory already defined" in str(DuplicateRegistration(Sprocket))
    assert "State 'rusty' already defined" in str(DuplicateRegistration(Sprocket, "rusty"))


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (UnknownType(Sprocket), LookupError),
        (UnknownState(Sprocket, "x"), LookupError),
        (DuplicateRegistration(Sprocket), ValueError),
        (InvalidValue(1), TypeError),
        (InvalidOffset(-1), TypeError),
        (OffsetNotFound(3), LookupError),
        (EmptyCollection("first"), IndexError),
        (UnresolvedReturnType(len, "Nowhere"), TypeError),
    ],
)
def test_errors_extend_fixture_error_and_builtin(error, builtin):
    assert isinstance(error, FixtureError)
    assert isinstance(error, builtin)
