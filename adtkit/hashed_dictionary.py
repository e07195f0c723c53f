"""A dictionary that hashes string keys into chained buckets."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")

DEFAULT_SIZE = 101

_INTEGER = re.compile(r"[+-]?\d+")


class NotFoundError(KeyError):
    """Raised when no entry has the requested key."""


@dataclass
class Entry(Generic[V]):
    """A key paired with the item stored under it."""

    key: str
    item: V


class HashedDictionary(Generic[V]):
    """A hash table with separate chaining and a fixed number of buckets.

    A key's bucket is the sum of its character codes modulo the table size.
    New entries go to the front of their bucket's chain and duplicate keys
    are allowed: lookups and removals find the most recently added entry.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._size = size
        self._buckets: list[list[Entry[V]]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        """The number of buckets in the table."""
        return self._size

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key) is not None

    def __getitem__(self, key: str) -> V:
        return self.get_item(key)

    def __iter__(self) -> Iterator[str]:
        """Yield every key, bucket by bucket, newest first within a bucket."""
        for chain in self._buckets:
            for entry in list(chain):
                yield entry.key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, items={self._count})"

    def hash_index(self, key: str) -> int:
        """Return the bucket index for ``key``."""
        return sum(ord(character) for character in key) % self._size

    def _find(self, key: str) -> Entry[V] | None:
        chain = self._buckets[self.hash_index(key)]
        return next((entry for entry in chain if entry.key == key), None)

    def add(self, key: str, item: V) -> bool:
        """Store ``item`` under ``key`` at the front of its chain."""
        self._buckets[self.hash_index(key)].insert(0, Entry(key, item))
        self._count += 1
        return True

    def remove(self, key: str) -> bool:
        """Remove the newest entry with ``key``; return whether one was found."""
        chain = self._buckets[self.hash_index(key)]
        for position, entry in enumerate(chain):
            if entry.key == key:
                del chain[position]
                self._count -= 1
                return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        for chain in self._buckets:
            chain.clear()
        self._count = 0

    def get_item(self, key: str) -> V:
        """Return the item stored under ``key``, the newest if there are several."""
        entry = self._find(key)
        if entry is None:
            raise NotFoundError(key)
        return entry.item

    def copy(self) -> HashedDictionary[V]:
        """Return an independent table with the same entries in the same order."""
        duplicate: HashedDictionary[V] = HashedDictionary(self._size)
        duplicate._buckets = [
            [Entry(entry.key, entry.item) for entry in chain] for chain in self._buckets
        ]
        duplicate._count = self._count
        return duplicate


class _Scanner:
    """Reads whitespace-separated fields the way a text stream extracts them."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    def _skip_space(self) -> None:
        while self._position < len(self._text) and self._text[self._position].isspace():
            self._position += 1

    def word(self, name: str) -> str:
        self._skip_space()
        start = self._position
        while self._position < len(self._text) and not self._text[self._position].isspace():
            self._position += 1
        if start == self._position:
            raise ValueError(f"missing {name}")
        return self._text[start : self._position]

    def character(self, name: str) -> str:
        self._skip_space()
        if self._position >= len(self._text):
            raise ValueError(f"missing {name}")
        character = self._text[self._position]
        self._position += 1
        return character

    def integer(self, name: str) -> int:
        self._skip_space()
        match = _INTEGER.match(self._text, self._position)
        if match is None:
            raise ValueError(f"{name} is not an integer")
        self._position = match.end()
        return int(match.group())


@dataclass
class FamousPerson:
    """One record of the famous-people file."""

    id: str
    tax_status: str
    lastname: str
    firstname: str
    age: int
    street: str
    zip: str

    @classmethod
    def parse(cls, line: str) -> FamousPerson:
        """Read a record: id, one-character tax status, names, age, street, zip."""
        scanner = _Scanner(line)
        return cls(
            id=scanner.word("id"),
            tax_status=scanner.character("tax status"),
            lastname=scanner.word("last name"),
            firstname=scanner.word("first name"),
            age=scanner.integer("age"),
            street=scanner.word("street"),
            zip=scanner.word("zip"),
        )

    def __str__(self) -> str:
        return " ".join(
            (
                self.id,
                self.tax_status,
                self.lastname,
                self.firstname,
                str(self.age),
                self.street,
                self.zip,
            )
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Load people from a file into a dictionary keyed by last name."""
    parser = argparse.ArgumentParser(description="Load famous people into a hashed dictionary.")
    parser.add_argument("path", nargs="?", default="famous.txt")
    args = parser.parse_args(argv)

    people: HashedDictionary[FamousPerson] = HashedDictionary()
    try:
        with open(args.path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        lines = []

    for line in lines:
        print(line)
        try:
            person = FamousPerson.parse(line)
        except ValueError as error:
            print(f"Skipping record: {error}", file=sys.stderr)
            continue
        print(person.lastname)
        people.add(person.lastname, person)

    print("This is a test.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())