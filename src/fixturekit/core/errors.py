"""Exceptions raised by fixturekit.

Every error derives from FixtureError and from the closest builtin, so callers
can catch either. All of them are programmer errors surfaced immediately to
the caller; nothing in the library retries or recovers.
"""

from __future__ import annotations

from typing import Any


def type_name(entity_type: Any) -> str:
    """Qualified name used in error messages.

    Args:
        entity_type: Class (or any object) to name.

    Returns:
        ``module.QualName`` for classes, ``repr`` otherwise.
    """
    if isinstance(entity_type, type):
        return f"{entity_type.__module__}.{entity_type.__qualname__}"
    return repr(entity_type)


class FixtureError(Exception):
    """Base class for all fixturekit errors."""

    pass


class UnknownType(FixtureError, LookupError):
    """Raised when an entity type has no registered constructor."""

    def __init__(self, entity_type: Any):
        self.entity_type = entity_type
        super().__init__(f"Factory not defined for {type_name(entity_type)}")


class DuplicateRegistration(FixtureError, ValueError):
    """Raised when a constructor or state is registered twice."""

    def __init__(self, entity_type: Any, state: str | None = None):
        self.entity_type = entity_type
        self.state = state
        if state is None:
            message = f"Factory already defined for {type_name(entity_type)}"
        else:
            message = f"State '{state}' already defined for {type_name(entity_type)}"
        super().__init__(message)


class UnknownState(FixtureError, LookupError):
    """Raised when one or more selected states are not registered.

    Attributes:
        entity_type: Entity type the builder is bound to.
        missing: Every unknown state name, in the order given.
    """

    def __init__(self, entity_type: Any, *missing: str):
        self.entity_type = entity_type
        self.missing = missing
        super().__init__(
            f"States [{' '.join(missing)}] not defined for {type_name(entity_type)}"
        )


class MissingReturnType(FixtureError, TypeError):
    """Raised when a callable declares no return type."""

    def __init__(self, function: Any):
        self.function = function
        name = getattr(function, "__qualname__", repr(function))
        super().__init__(f"Function {name} is missing return type")


class UnresolvedReturnType(FixtureError, TypeError):
    """Raised when a string return annotation cannot be resolved."""

    def __init__(self, function: Any, annotation: str):
        self.function = function
        self.annotation = annotation
        name = getattr(function, "__qualname__", repr(function))
        super().__init__(f"Cannot resolve return type {annotation!r} of function {name}")


class InvalidConstructor(FixtureError, TypeError):
    """Raised by strict registration when a constructor's declared return type is wrong."""

    pass


class InvalidStateFunction(FixtureError, TypeError):
    """Raised by strict registration when a state's declared return type is wrong."""

    pass


class InvalidResult(FixtureError, TypeError):
    """Raised when a constructor, state, or override returns something unusable."""

    pass


class InvalidValue(FixtureError, TypeError):
    """Raised when a collection receives a primitive instead of an object."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Collection items must be objects, got {type(value).__name__}")


class InvalidOffset(FixtureError, TypeError):
    """Raised when a collection offset is not a non-negative integer."""

    def __init__(self, offset: Any):
        self.offset = offset
        super().__init__(f"Collection offset must be a non-negative integer, got {offset!r}")


class OffsetNotFound(FixtureError, LookupError):
    """Raised when reading an offset that holds no item."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"No item at offset {offset}")


class EmptyCollection(FixtureError, IndexError):
    """Raised by first/last/random on a collection with no items."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot take {operation} item of an empty collection")
