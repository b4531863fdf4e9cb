"""Core functionalities: stateless contracts, errors, and type aliases.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For stateful services, see registry/, builder/, and collection/.
"""

from fixturekit.core.contract import (
    ReturnType,
    StateDefinition,
    StateMode,
    check_constructed,
    resolve_step,
    validate_constructor,
    validate_state_function,
)
from fixturekit.core.errors import (
    DuplicateRegistration,
    EmptyCollection,
    FixtureError,
    InvalidConstructor,
    InvalidOffset,
    InvalidResult,
    InvalidStateFunction,
    InvalidValue,
    MissingReturnType,
    OffsetNotFound,
    UnknownState,
    UnknownType,
    UnresolvedReturnType,
)
from fixturekit.core.types import Constructor, Override, StateFunction

__all__ = [
    # Types
    "Constructor",
    "StateFunction",
    "Override",
    # Contract
    "ReturnType",
    "StateDefinition",
    "StateMode",
    "validate_constructor",
    "validate_state_function",
    "check_constructed",
    "resolve_step",
    # Errors
    "FixtureError",
    "UnknownType",
    "DuplicateRegistration",
    "UnknownState",
    "MissingReturnType",
    "UnresolvedReturnType",
    "InvalidConstructor",
    "InvalidStateFunction",
    "InvalidResult",
    "InvalidValue",
    "InvalidOffset",
    "OffsetNotFound",
    "EmptyCollection",
]
