"""A set of unique items held in a fixed-capacity array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 6


class CapacityExceededError(Exception):
    """Raised when an item is inserted into a full set."""


class DuplicateItemError(ValueError):
    """Raised when an item already in the set is inserted again."""


class ItemNotFoundError(LookupError):
    """Raised when an item that is not in the set is erased."""


class ArraySet(Generic[T]):
    """A set with a fixed capacity that rejects duplicates.

    Items are compared with ``==`` only, so unhashable items are allowed.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The largest number of items the set can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, item: object) -> bool:
        return any(existing == item for existing in self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"

    def insert(self, item: T) -> None:
        """Add ``item``; raise if it is already present or the set is full."""
        if item in self:
            raise DuplicateItemError(item)
        if len(self._items) >= self._capacity:
            raise CapacityExceededError(
                f"set is full ({self._capacity} items)"
            )
        self._items.append(item)

    def _index_of(self, item: T) -> int | None:
        return next(
            (index for index, existing in enumerate(self._items) if existing == item),
            None,
        )

    def erase(self, item: T) -> None:
        """Remove ``item``, moving the last item into its place."""
        index = self._index_of(item)
        if index is None:
            raise ItemNotFoundError(item)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def count(self, item: T) -> int:
        """Return 1 if ``item`` is in the set, otherwise 0."""
        return 1 if item in self else 0

    def to_list(self) -> list[T]:
        """Return the items in storage order."""
        return list(self._items)

    def copy(self) -> ArraySet[T]:
        """Return an independent set with the same items and capacity."""
        duplicate: ArraySet[T] = ArraySet(self._capacity)
        duplicate._items = list(self._items)
        return duplicate

    @classmethod
    def _from_items(cls, items: Iterable[T]) -> ArraySet[T]:
        result: ArraySet[T] = cls(DEFAULT_CAPACITY)
        for item in items:
            result.insert(item)
        return result

    def union(self, other: ArraySet[T]) -> ArraySet[T]:
        """Return a new default-capacity set of items in either set."""
        result = self._from_items(self._items)
        for item in other._items:
            if item not in result:
                result.insert(item)
        return result

    def intersection(self, other: ArraySet[T]) -> ArraySet[T]:
        """Return a new default-capacity set of items in both sets."""
        return self._from_items(item for item in self._items if item in other)

    def difference(self, other: ArraySet[T]) -> ArraySet[T]:
        """Return a new default-capacity set of items in this set but not ``other``."""
        result = self._from_items(self._items)
        for item in self._items:
            if item in other:
                result.erase(item)
        return result