"""fixturekit: test fixture factories with named states.

Usage:
    from dataclasses import dataclass

    from fixturekit import FixtureRegistry

    @dataclass
    class Widget:
        enabled: bool = True

    registry = FixtureRegistry()
    registry.register(Widget, Widget)
    registry.register_state(Widget, "disabled", lambda w: setattr(w, "enabled", False))

    widget = registry.new_builder(Widget).one()
    disabled = registry.new_builder(Widget).state("disabled").many(3)
"""

__version__ = "0.1.0"

# Builder and collection
from fixturekit.builder import Builder
from fixturekit.collection import Collection

# Configuration
from fixturekit.config import FixtureSettings

# Core primitives
from fixturekit.core import (
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
    ReturnType,
    StateMode,
    UnknownState,
    UnknownType,
    UnresolvedReturnType,
)

# Registry
from fixturekit.registry import FixtureRegistry, get_registry

__all__ = [
    # Version
    "__version__",
    # Registry
    "FixtureRegistry",
    "get_registry",
    # Builder
    "Builder",
    "Collection",
    # Contract
    "StateMode",
    "ReturnType",
    # Config
    "FixtureSettings",
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
