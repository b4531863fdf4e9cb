"""Fixture registry: constructors and named states per entity type.

Usage:
    registry = FixtureRegistry()

    @registry.define(Widget)
    def make_widget() -> Widget:
        return Widget(enabled=True)

    @registry.define_state(Widget, "disabled")
    def disable(widget: Widget) -> None:
        widget.enabled = False

    widgets = registry.new_builder(Widget).state("disabled").many(3)
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Any, TypeVar

from fixturekit.builder import Builder
from fixturekit.config import FixtureSettings
from fixturekit.core.contract import (
    StateDefinition,
    StateMode,
    validate_constructor,
    validate_state_function,
)
from fixturekit.core.errors import DuplicateRegistration, UnknownType, type_name
from fixturekit.core.types import Constructor, StateFunction

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes, bytearray)


class FixtureRegistry:
    """Maps entity types to a constructor and an ordered set of named states.

    Registrations are permanent for the registry's lifetime: there is no
    unregister, and registering a type or state name twice is an error.
    Builders handed out by ``new_builder`` hold a snapshot of the registration
    at that moment.

    Args:
        settings: Registry configuration. Defaults to ``FixtureSettings()``,
            read from FIXTUREKIT_* environment variables.
        strict: Overrides ``settings.strict`` when given.

    Thread Safety:
        None. Callers sharing a registry across threads must hold their own
        lock around ``register``, ``register_state`` and ``new_builder``.
    """

    def __init__(self, settings: FixtureSettings | None = None, *, strict: bool | None = None):
        """Initialize empty registry."""
        self._settings = settings if settings is not None else FixtureSettings()
        self._strict = self._settings.strict if strict is None else strict
        self._rng = (
            random.Random(self._settings.random_seed)
            if self._settings.random_seed is not None
            else None
        )
        self._constructors: dict[type, Constructor[Any]] = {}
        self._states: dict[type, dict[str, StateDefinition]] = {}

    @property
    def strict(self) -> bool:
        """Whether declared return types are validated on registration."""
        return self._strict

    def register(self, entity_type: type, constructor: Constructor[Any]) -> FixtureRegistry:
        """Register the constructor for an entity type.

        Args:
            entity_type: Class the constructor produces.
            constructor: Zero-argument callable returning a new instance.

        Returns:
            This registry, for chaining.

        Raises:
            TypeError: If ``entity_type`` is not an object class or
                ``constructor`` is not callable.
            DuplicateRegistration: If the type already has a constructor.
            InvalidConstructor: In strict mode, if the declared return type is
                missing, optional, or not exactly ``entity_type``.
        """
        if not isinstance(entity_type, type) or issubclass(entity_type, _PRIMITIVE_TYPES):
            raise TypeError(f"Entity type must be an object class, got {entity_type!r}")
        if not callable(constructor):
            raise TypeError(f"Constructor for {type_name(entity_type)} is not callable")
        if entity_type in self._constructors:
            raise DuplicateRegistration(entity_type)
        if self._strict:
            validate_constructor(entity_type, constructor)

        self._constructors[entity_type] = constructor
        self._states[entity_type] = {}
        logger.debug("Registered factory for %s", type_name(entity_type))
        return self

    def register_state(
        self,
        entity_type: type,
        name: str,
        function: StateFunction[Any],
        mode: StateMode = StateMode.AUTO,
    ) -> FixtureRegistry:
        """Register a named state for an entity type.

        Args:
            entity_type: Registered entity type.
            name: State name, unique within the type.
            function: Called with the instance; returns None after mutating it
                or a replacement instance.
            mode: Declared result contract, enforced at build time.

        Returns:
            This registry, for chaining.

        Raises:
            UnknownType: If ``entity_type`` has no constructor.
            TypeError: If ``function`` is not callable.
            DuplicateRegistration: If ``name`` is already registered for the type.
            InvalidStateFunction: In strict mode, if the declared return type
                is not None or ``entity_type``, or contradicts ``mode``.
        """
        if not self.has(entity_type):
            raise UnknownType(entity_type)
        if not callable(function):
            raise TypeError(f"State '{name}' for {type_name(entity_type)} is not callable")
        states = self._states[entity_type]
        if name in states:
            raise DuplicateRegistration(entity_type, name)
        if self._strict:
            validate_state_function(entity_type, name, function, mode)

        states[name] = StateDefinition(name=name, function=function, mode=mode)
        logger.debug("Registered state '%s' for %s (%s)", name, type_name(entity_type), mode.name)
        return self

    def define(self, entity_type: type) -> Callable[[F], F]:
        """Decorator form of ``register``.

        >>> @registry.define(Widget)
        ... def make_widget() -> Widget:
        ...     return Widget()
        """

        def decorator(constructor: F) -> F:
            self.register(entity_type, constructor)
            return constructor

        return decorator

    def define_state(
        self,
        entity_type: type,
        name: str,
        mode: StateMode = StateMode.AUTO,
    ) -> Callable[[F], F]:
        """Decorator form of ``register_state``.

        Note:
            The entity type must be registered before the decorated function
            is defined.
        """

        def decorator(function: F) -> F:
            self.register_state(entity_type, name, function, mode)
            return function

        return decorator

    def has(self, entity_type: type) -> bool:
        """Check if a type has a registered constructor."""
        return entity_type in self._constructors

    def has_state(self, entity_type: type, name: str) -> bool:
        """Check if a state is registered for a type. False for unknown types."""
        return name in self._states.get(entity_type, {})

    def registered_types(self) -> list[type]:
        """Registered entity types, in registration order."""
        return list(self._constructors)

    def new_builder[T](self, entity_type: type[T]) -> Builder[T]:
        """Create a builder for an entity type.

        The builder captures the current constructor and states; states
        registered afterwards are not visible to it.

        Raises:
            UnknownType: If ``entity_type`` has no constructor.
        """
        if not self.has(entity_type):
            raise UnknownType(entity_type)

        return Builder(
            entity_type,
            self._constructors[entity_type],
            dict(self._states[entity_type]),
            rng=self._rng,
        )

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)


# Module-level registry instance, created on first use
_registry: FixtureRegistry | None = None


def get_registry() -> FixtureRegistry:
    """Access the process-wide default registry.

    Explicit ``FixtureRegistry()`` instances are independent of it and of
    each other.

    Returns:
        The default FixtureRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = FixtureRegistry()
    return _registry
