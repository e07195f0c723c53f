"""A stack backed by an array that doubles and halves its capacity."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 1


class StackEmptyError(IndexError):
    """Raised when the top of an empty stack is read or removed."""


class ArrayStack(Generic[T]):
    """A last-in, first-out stack with a tracked array capacity.

    The capacity starts at one, doubles when a push finds the array full,
    and halves when a pop leaves fewer items than half of it.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._capacity = DEFAULT_CAPACITY

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    @property
    def capacity(self) -> int:
        """The size of the backing array."""
        return self._capacity

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        item = self._items.pop()
        if self._capacity > 1 and len(self._items) < self._capacity // 2:
            self._capacity //= 2
        return item

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("top of an empty stack")
        return self._items[-1]

    def copy(self) -> ArrayStack[T]:
        """Return an independent stack with the same items and capacity."""
        duplicate: ArrayStack[T] = ArrayStack()
        duplicate._items = list(self._items)
        duplicate._capacity = self._capacity
        return duplicate


def main(argv: Sequence[str] | None = None) -> int:
    """Push the letters A to J, then pop and print them."""
    stack: ArrayStack[str] = ArrayStack()
    for offset in range(10):
        stack.push(chr(ord("A") + offset))

    out = sys.stdout
    print("Pushing 'A' through 'J'", file=out)
    print("Now popping them all off and printing as we go: ", file=out)
    while stack:
        print(stack.pop(), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())