"""A max-heap of integers that can report each swap it makes."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO


class MaxHeap:
    """An array-backed binary max-heap of integers.

    When ``trace`` is a text stream, insertions, removals and every swap
    made while restoring the heap are written to it.
    """

    def __init__(self, trace: TextIO | None = None) -> None:
        self._items: list[int] = []
        self._trace = trace

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._items) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _log(self, message: str) -> None:
        if self._trace is not None:
            print(message, file=self._trace)

    def _percolate_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                return
            self._log(f"   PercolateUp() swap: {items[parent]} <-> {items[index]}")
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _percolate_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while 2 * index + 1 < size:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            self._log(f"   PercolateDown() swap: {items[index]} <-> {items[largest]}")
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def to_list(self) -> list[int]:
        """Return the heap's array in storage order."""
        return list(self._items)

    def insert(self, value: int) -> None:
        """Add ``value`` and restore the heap property."""
        self._log(f"Insert({value}):")
        self._items.append(value)
        self._percolate_up(len(self._items) - 1)

    def remove(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("remove from an empty heap")
        self._log("Remove():")
        largest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._percolate_down(0)
        return largest

    def copy(self) -> MaxHeap:
        """Return an independent heap with the same array and trace stream."""
        duplicate = MaxHeap(self._trace)
        duplicate._items = list(self._items)
        return duplicate

    def __add__(self, other: object) -> MaxHeap:
        """Combine two heaps by concatenating their arrays and rebuilding."""
        if not isinstance(other, MaxHeap):
            return NotImplemented
        combined = MaxHeap(self._trace)
        combined._items = self._items + other._items
        for index in range(len(combined._items) // 2 - 1, -1, -1):
            combined._percolate_down(index)
        return combined


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate insertion, removal and combining of heaps with tracing."""
    out = sys.stdout
    print("******** TEST Insert() and Remove() **********\n", file=out)

    heap = MaxHeap(trace=out)
    for value in range(10):
        heap.insert(value)
    print(heap, file=out)

    heap.remove()
    heap.remove()
    print(heap, file=out)

    print("*********** TEST + ***********\n", file=out)
    first = MaxHeap(trace=out)
    second = MaxHeap(trace=out)
    for value in range(100, 110):
        first.insert(value)
    print(first, file=out)
    for value in range(200, 210):
        second.insert(value)
    print(second, file=out)

    combined = first + second
    print(combined, file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())