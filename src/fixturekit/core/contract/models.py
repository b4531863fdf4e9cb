"""Contract models: state modes, declared return types, and state definitions."""

from __future__ import annotations

import functools
import inspect
import types
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from fixturekit.core.errors import MissingReturnType, UnresolvedReturnType


class StateMode(Enum):
    """Declared result contract of a state or override function."""

    AUTO = auto()  # None keeps the object, an entity instance replaces it
    MUTATE = auto()  # Must return None
    REPLACE = auto()  # Must return an instance of the entity type


_NONE_TYPE = type(None)


def _call_target(function: Callable[..., Any]) -> Any:
    """Find the object whose annotations describe what calling ``function`` returns."""
    target: Any = function
    while isinstance(target, functools.partial):
        target = target.func
    if isinstance(target, type):
        return target
    if inspect.isfunction(target) or inspect.ismethod(target) or inspect.isbuiltin(target):
        return target
    # Callable instance: annotations live on __call__
    return type(target).__call__


def _resolve(
    target: Any,
    function: Callable[..., Any],
    annotation: str,
    localns: Mapping[str, Any] | None,
) -> Any:
    """Evaluate a string annotation the way ``inspect.get_annotations(eval_str=True)`` does."""
    globalns = getattr(inspect.unwrap(target), "__globals__", {})
    try:
        return eval(annotation, globalns, dict(localns or {}))  # noqa: S307
    except NameError as e:
        raise UnresolvedReturnType(function, annotation) from e


@dataclass(frozen=True, slots=True)
class ReturnType:
    """Declared return type of a callable.

    Attributes:
        annotation: Declared type with any ``None`` member removed. ``None``
            when the callable is declared to return nothing.
        allows_none: True when the declaration is ``X | None``.
    """

    annotation: Any
    allows_none: bool

    def is_type(self, expected: Any) -> bool:
        """Check the declared type is exactly ``expected``."""
        return self.annotation is expected

    def is_void(self) -> bool:
        """Check the callable is declared to return nothing (``-> None``)."""
        return self.annotation is None

    @classmethod
    def from_annotation(cls, annotation: Any) -> ReturnType:
        """Normalize a resolved return annotation.

        Args:
            annotation: Resolved (non-string) return annotation.

        Returns:
            ReturnType with ``None`` split out of unions.
        """
        if annotation is None or annotation is _NONE_TYPE:
            return cls(annotation=None, allows_none=False)

        if typing.get_origin(annotation) in (typing.Union, types.UnionType):
            members = [arg for arg in typing.get_args(annotation) if arg is not _NONE_TYPE]
            allows_none = len(members) != len(typing.get_args(annotation))
            if len(members) == 1:
                return cls(annotation=members[0], allows_none=allows_none)
            remaining = functools.reduce(lambda a, b: a | b, members)
            return cls(annotation=remaining, allows_none=allows_none)

        return cls(annotation=annotation, allows_none=False)

    @classmethod
    def from_callable(
        cls,
        function: Callable[..., Any],
        localns: Mapping[str, Any] | None = None,
    ) -> ReturnType:
        """Inspect a callable's declared return type.

        Classes are their own constructors and return themselves. Partials are
        unwrapped; callable instances are inspected through ``__call__``.
        Only the return annotation is read, so unresolvable parameter
        annotations do not matter.

        Args:
            function: Callable to inspect.
            localns: Extra names for resolving a string (postponed) return
                annotation, e.g. a class defined inside a test function.

        Returns:
            Normalized declared return type.

        Raises:
            MissingReturnType: If the callable has no return annotation.
            UnresolvedReturnType: If a string return annotation names
                something that is not in scope.
        """
        target = _call_target(function)
        if isinstance(target, type):
            return cls(annotation=target, allows_none=False)

        try:
            annotations = inspect.get_annotations(target)
        except TypeError:
            # Builtins and some C callables carry no annotations at all
            annotations = {}
        if "return" not in annotations:
            raise MissingReturnType(function)

        annotation = annotations["return"]
        if isinstance(annotation, str):
            annotation = _resolve(target, function, annotation, localns)
        return cls.from_annotation(annotation)


@dataclass(frozen=True, slots=True)
class StateDefinition:
    """A named state registered for an entity type."""

    name: str
    function: Callable[[Any], Any]
    mode: StateMode = StateMode.AUTO
