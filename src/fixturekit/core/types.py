"""Core type definitions for fixturekit."""

from collections.abc import Callable

type Constructor[T] = Callable[[], T]
"""Zero-argument producer of a new entity instance.

Called once per produced instance, never cached. A class is a valid constructor.
"""

type StateFunction[T] = Callable[[T], T | None]
"""Mutate-or-replace step applied to an instance.

Returning None keeps the (mutated) instance; returning an instance of the
entity type replaces it for every later step.
"""

type Override[T] = StateFunction[T]
"""Ad-hoc state function supplied at the call site, applied after selected states."""
