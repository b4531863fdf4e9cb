"""Ordered, offset-indexed container for built fixtures.

Usage:
    users = Collection(alice, bob)

    # Dict-style access
    first = users[0]
    users[0] = carol           # insert at 0, shifting alice and bob right
    users[None] = dave         # append
    del users[1]

    # Membership by offset
    if 3 in users:
        ...

    admins = users.filter(lambda u: u.is_admin)
    everyone = users + admins
"""

from __future__ import annotations

import random as _random
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self

from fixturekit.core.errors import EmptyCollection, InvalidOffset, InvalidValue, OffsetNotFound

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes, bytearray)


def _check_value(value: Any) -> None:
    if isinstance(value, _PRIMITIVES):
        raise InvalidValue(value)


def _is_offset(offset: Any) -> bool:
    return isinstance(offset, int) and not isinstance(offset, bool) and offset >= 0


def _check_offset(offset: Any) -> int:
    if not _is_offset(offset):
        raise InvalidOffset(offset)
    return offset


class Collection[T]:
    """Ordered sequence of fixtures keyed by non-negative integer offsets.

    Offsets are logical positions and may have gaps after a sparse ``set`` or
    an ``unset``. Items are always kept and iterated in ascending offset order.

    Args:
        *items: Initial items, stored at offsets 0..n-1.
        rng: Random source used by ``random()``. Defaults to the module RNG.
    """

    def __init__(self, *items: T, rng: _random.Random | None = None):
        self._items: dict[int, T] = {}
        self._rng = rng
        for item in items:
            self.add(item)

    # --- Offset access ---

    @property
    def span(self) -> int:
        """One past the highest offset in use, 0 when empty.

        Equals ``len(self)`` unless the collection has gaps.
        """
        if not self._items:
            return 0
        return next(reversed(self._items)) + 1

    def has(self, offset: object) -> bool:
        """Check an item is stored at ``offset``. False for anything that is not an offset."""
        return _is_offset(offset) and offset in self._items

    def get(self, offset: int) -> T:
        """Get the item at ``offset``.

        Raises:
            InvalidOffset: If ``offset`` is not a non-negative integer.
            OffsetNotFound: If no item is stored there.
        """
        offset = _check_offset(offset)
        try:
            return self._items[offset]
        except KeyError:
            raise OffsetNotFound(offset) from None

    def set(self, offset: int | None, value: T) -> None:
        """Store ``value`` at ``offset``.

        - ``offset is None``: append, same as ``add(value)``.
        - ``offset <= span``: insert at ``offset``; every item at or after it
          moves one offset to the right.
        - ``offset > span``: assign directly, leaving a gap before it.

        Raises:
            InvalidValue: If ``value`` is a primitive.
            InvalidOffset: If ``offset`` is not a non-negative integer.
        """
        _check_value(value)
        if offset is None:
            self.add(value)
            return

        offset = _check_offset(offset)
        if offset > self.span:
            self._items[offset] = value
            return

        shifted: dict[int, T] = {}
        for key, item in self._items.items():
            if key == offset:
                shifted[offset] = value
            shifted[key + 1 if key >= offset else key] = item
        if offset not in shifted:
            shifted[offset] = value
            shifted = dict(sorted(shifted.items()))
        self._items = shifted

    def unset(self, offset: int) -> None:
        """Remove the item at ``offset``. No-op when there is none.

        Raises:
            InvalidOffset: If ``offset`` is not a non-negative integer.
        """
        self._items.pop(_check_offset(offset), None)

    def __contains__(self, offset: object) -> bool:
        return self.has(offset)

    def __getitem__(self, offset: int) -> T:
        return self.get(offset)

    def __setitem__(self, offset: int | None, value: T) -> None:
        self.set(offset, value)

    def __delitem__(self, offset: int) -> None:
        self.unset(offset)

    # --- Bulk operations ---

    def add(self, value: T, *values: T) -> Self:
        """Append one or more items after the highest offset in use.

        Returns:
            This collection, for chaining.

        Raises:
            InvalidValue: If any value is a primitive. Nothing is added then.
        """
        new_values = (value, *values)
        for item in new_values:
            _check_value(item)
        for item in new_values:
            self._items[self.span] = item
        return self

    def merge(self, other: Iterable[T]) -> Collection[T]:
        """Create a new collection holding this collection's items, then ``other``'s.

        Neither input is modified. The result is gap-free.
        """
        return Collection(*self, *other, rng=self._rng)

    def __add__(self, other: Collection[T]) -> Collection[T]:
        if not isinstance(other, Collection):
            return NotImplemented
        return self.merge(other)

    def apply(self, function: Callable[[T], Any]) -> Self:
        """Call ``function`` on every item in order, for side effects.

        Return values are ignored; items are never replaced.

        Returns:
            This collection, for chaining.
        """
        for item in list(self._items.values()):
            function(item)
        return self

    def filter(self, predicate: Callable[[T], Any]) -> Collection[T]:
        """Create a new collection of items for which ``predicate`` is truthy.

        Relative order is kept. The original collection is unchanged.
        """
        return Collection(*(item for item in self if predicate(item)), rng=self._rng)

    # --- Picking items ---

    def first(self) -> T:
        """Item with the lowest offset.

        Raises:
            EmptyCollection: If there are no items.
        """
        if not self._items:
            raise EmptyCollection("first")
        return next(iter(self._items.values()))

    def last(self) -> T:
        """Item with the highest offset.

        Raises:
            EmptyCollection: If there are no items.
        """
        if not self._items:
            raise EmptyCollection("last")
        return next(reversed(self._items.values()))

    def random(self, rng: _random.Random | None = None) -> T:
        """Pick one item uniformly at random.

        Args:
            rng: Random source for this call. Falls back to the collection's
                own source, then the module RNG.

        Raises:
            EmptyCollection: If there are no items.
        """
        if not self._items:
            raise EmptyCollection("random")
        source = rng or self._rng or _random
        return source.choice(list(self._items.values()))

    # --- Views ---

    def count(self) -> int:
        """Number of stored items (gaps are not counted).

        After a sparse ``set`` this is less than ``span``, the "highest offset + 1" length.
        """
        return len(self._items)

    def offsets(self) -> list[int]:
        """Offsets in use, ascending."""
        return list(self._items)

    def items(self) -> Iterator[tuple[int, T]]:
        """Iterate ``(offset, item)`` pairs in offset order."""
        return iter(list(self._items.items()))

    def to_list(self) -> list[T]:
        """Items in offset order as a plain list."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def __repr__(self) -> str:
        return f"Collection({self.to_list()!r})"
