"""Builder: produces fixtures for one entity type.

Usage:
    builder = registry.new_builder(Widget)

    widget = builder.one()
    disabled = builder.state("disabled").one()
    renamed = builder.one(lambda w: setattr(w, "name", "renamed"))
    widgets = builder.state("disabled", "archived").many(3)

Pipeline, run from scratch for every produced instance:
    1. constructor() -> obj
    2. each selected state, in selection order, is called with obj; a None
       result keeps obj, an instance result replaces it
    3. the override, if given, follows the same rule
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from types import MappingProxyType
from typing import Self

from fixturekit.collection import Collection
from fixturekit.core.contract import StateDefinition, check_constructed, resolve_step
from fixturekit.core.errors import UnknownState, type_name
from fixturekit.core.types import Constructor, Override

logger = logging.getLogger(__name__)


class Builder[T]:
    """Builds instances of one entity type with a chosen set of states.

    The constructor and the state mapping are captured when the builder is
    created; later registrations on the registry do not reach it. The state
    selection is the only mutable part and is replaced wholesale by ``state``.

    Args:
        entity_type: Class the builder produces.
        constructor: Zero-argument callable returning a new instance.
        states: State name to definition, in registration order.
        rng: Random source passed to collections made by ``many``.
    """

    def __init__(
        self,
        entity_type: type[T],
        constructor: Constructor[T],
        states: Mapping[str, StateDefinition] | None = None,
        rng: random.Random | None = None,
    ):
        self._entity_type = entity_type
        self._constructor = constructor
        self._states: Mapping[str, StateDefinition] = MappingProxyType(dict(states or {}))
        self._selected: tuple[str, ...] = ()
        self._rng = rng

    @property
    def entity_type(self) -> type[T]:
        """Class this builder produces."""
        return self._entity_type

    @property
    def selected_states(self) -> tuple[str, ...]:
        """States applied to every produced instance, in application order."""
        return self._selected

    def available_states(self) -> list[str]:
        """Names of all states registered for the entity type, in registration order."""
        return list(self._states)

    def state(self, name: str, *names: str) -> Self:
        """Select the states to apply, replacing any previous selection.

        States are applied in the order given. Every name is checked before
        the selection changes.

        Args:
            name: First state to apply.
            *names: Further states, applied after ``name``.

        Returns:
            This builder, for chaining.

        Raises:
            UnknownState: Listing every name that is not registered.
        """
        selected = (name, *names)
        missing = [state for state in selected if state not in self._states]
        if missing:
            raise UnknownState(self._entity_type, *missing)

        self._selected = selected
        return self

    select_states = state

    def clear_states(self) -> Self:
        """Drop the state selection so later builds apply no states.

        Returns:
            This builder, for chaining.
        """
        self._selected = ()
        return self

    def one(self, override: Override[T] | None = None) -> T:
        """Build one instance.

        Args:
            override: Applied after the selected states; may mutate the
                instance and return None, or return a replacement.

        Returns:
            The built instance.
        """
        return self._make(self._selected, override)

    def many(self, count: int, override: Override[T] | None = None) -> Collection[T]:
        """Build ``count`` independent instances.

        Args:
            count: Number of instances; 0 gives an empty collection without
                calling the constructor.
            override: Applied to each instance after the selected states.

        Returns:
            Collection of the instances in build order.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"Cannot build a negative number of fixtures: {count}")

        selected = self._selected
        logger.debug(
            "Building %d x %s with states %s",
            count,
            type_name(self._entity_type),
            list(selected),
        )
        objects = [self._make(selected, override) for _ in range(count)]
        return Collection(*objects, rng=self._rng)

    def _make(
        self,
        selected: tuple[str, ...],
        override: Override[T] | None,
    ) -> T:
        obj = check_constructed(self._entity_type, self._constructor())

        for name in selected:
            definition = self._states[name]
            obj = resolve_step(
                self._entity_type,
                obj,
                definition.function(obj),
                mode=definition.mode,
                step=f"State '{name}'",
            )

        if override is not None:
            obj = resolve_step(self._entity_type, obj, override(obj))

        return obj

    def __repr__(self) -> str:
        return f"Builder({type_name(self._entity_type)}, states={list(self._selected)})"

