"""Contract checks for constructors and state functions.

Registration-time checks read declared return types (strict mode only).
Build-time checks look at what a function actually returned and decide whether
it keeps or replaces the object being built.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fixturekit.core.contract.models import ReturnType, StateMode
from fixturekit.core.errors import (
    InvalidConstructor,
    InvalidResult,
    InvalidStateFunction,
    MissingReturnType,
    UnresolvedReturnType,
    type_name,
)


def _function_name(function: Callable[..., Any]) -> str:
    return getattr(function, "__qualname__", repr(function))


def _local_names(entity_type: type) -> dict[str, type]:
    # Lets postponed annotations name an entity class defined inside a function
    return {entity_type.__name__: entity_type}


def validate_constructor(entity_type: type, constructor: Callable[[], Any]) -> None:
    """Check a constructor declares it returns exactly ``entity_type``.

    Args:
        entity_type: Entity type being registered.
        constructor: Zero-argument constructor.

    Raises:
        InvalidConstructor: If the return type is missing, optional, or not
            exactly ``entity_type``.
    """
    name = _function_name(constructor)
    try:
        declared = ReturnType.from_callable(constructor, _local_names(entity_type))
    except MissingReturnType as e:
        raise InvalidConstructor(
            f"Constructor {name} for {type_name(entity_type)} has no return type"
        ) from e
    except UnresolvedReturnType as e:
        raise InvalidConstructor(
            f"Constructor {name} for {type_name(entity_type)}: cannot resolve return type "
            f"{e.annotation!r}"
        ) from e

    if declared.allows_none:
        raise InvalidConstructor(
            f"Constructor {name} for {type_name(entity_type)} must not return None"
        )
    if not declared.is_type(entity_type):
        raise InvalidConstructor(
            f"Constructor {name} returns {declared.annotation!r}, "
            f"expected {type_name(entity_type)}"
        )


def validate_state_function(
    entity_type: type,
    name: str,
    function: Callable[[Any], Any],
    mode: StateMode = StateMode.AUTO,
) -> None:
    """Check a state function's declared return type against its mode.

    Accepted declarations: ``None``, ``entity_type`` and ``entity_type | None``.
    MUTATE additionally requires ``None``; REPLACE requires ``entity_type``.

    Args:
        entity_type: Entity type the state belongs to.
        name: State name, for messages.
        function: State function.
        mode: Declared state mode.

    Raises:
        InvalidStateFunction: If the declaration is missing or not accepted.
    """
    prefix = f"State '{name}' for {type_name(entity_type)}"
    try:
        declared = ReturnType.from_callable(function, _local_names(entity_type))
    except MissingReturnType as e:
        raise InvalidStateFunction(f"{prefix} has no return type") from e
    except UnresolvedReturnType as e:
        raise InvalidStateFunction(
            f"{prefix}: cannot resolve return type {e.annotation!r}"
        ) from e

    if not (declared.is_void() or declared.is_type(entity_type)):
        raise InvalidStateFunction(
            f"{prefix} returns {declared.annotation!r}, "
            f"expected None or {type_name(entity_type)}"
        )
    if mode is StateMode.MUTATE and not declared.is_void():
        raise InvalidStateFunction(f"{prefix} is declared MUTATE but may return a value")
    if mode is StateMode.REPLACE and (declared.is_void() or declared.allows_none):
        raise InvalidStateFunction(f"{prefix} is declared REPLACE but may return None")


def check_constructed(entity_type: type, obj: Any) -> Any:
    """Check a constructor produced an instance of ``entity_type``.

    Returns:
        ``obj`` unchanged.

    Raises:
        InvalidResult: If ``obj`` is not an instance of ``entity_type``.
    """
    if not isinstance(obj, entity_type):
        raise InvalidResult(
            f"Constructor for {type_name(entity_type)} returned {type(obj).__name__}"
        )
    return obj


def resolve_step(
    entity_type: type,
    current: Any,
    result: Any,
    mode: StateMode = StateMode.AUTO,
    step: str = "override",
) -> Any:
    """Decide the object that continues down the pipeline after one step.

    Args:
        entity_type: Entity type being built.
        current: Object passed into the step.
        result: What the step returned.
        mode: Declared contract of the step.
        step: Step label for messages.

    Returns:
        ``current`` if the step returned None, else ``result``.

    Raises:
        InvalidResult: If the result is neither None nor an entity instance,
            or breaks the declared mode.
    """
    if result is None:
        if mode is StateMode.REPLACE:
            raise InvalidResult(
                f"{step} for {type_name(entity_type)} is declared REPLACE but returned None"
            )
        return current

    if mode is StateMode.MUTATE:
        raise InvalidResult(
            f"{step} for {type_name(entity_type)} is declared MUTATE "
            f"but returned {type(result).__name__}"
        )
    if not isinstance(result, entity_type):
        raise InvalidResult(
            f"{step} for {type_name(entity_type)} returned {type(result).__name__}, "
            f"expected None or {type_name(entity_type)}"
        )
    return result
