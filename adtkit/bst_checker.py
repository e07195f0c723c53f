"""Binary tree nodes and a checker for the binary-search-tree property."""

from __future__ import annotations

import re
from collections.abc import Iterable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer key in {text!r}")
    return int(match.group(1))


class Node:
    """A binary tree node with an integer key and optional children."""

    def __init__(
        self,
        key: int,
        left: Node | None = None,
        right: Node | None = None,
    ) -> None:
        self.key = key
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"

    def count(self) -> int:
        """Return the number of nodes in the tree rooted here."""
        total = 1
        for child in (self.left, self.right):
            if child is not None:
                total += child.count()
        return total

    def insert(self, node: Node) -> None:
        """Place ``node`` as a leaf by key; equal keys go to the right."""
        current = self
        while True:
            if node.key < current.key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def insert_all(self, keys: Iterable[int]) -> None:
        """Insert a new node for each key, in order."""
        for key in keys:
            self.insert(Node(key))

    @classmethod
    def parse(cls, text: str) -> Node | None:
        """Build a tree from ``(key)`` or ``(key, left, right)`` notation.

        A child that is not parenthesised (such as ``null`` or ``None``) is
        absent. Returns ``None`` when the text is not a node; raises
        ``ValueError`` when a key is not an integer.
        """
        text = text.lstrip()
        if not text or text[0] != "(" or text[-1] != ")":
            return None
        body = text[1:-1]

        commas: list[int] = []
        depth = 0
        for position, character in enumerate(body):
            if character == "(":
                depth += 1
            elif character == ")":
                depth -= 1
            elif character == "," and depth == 0:
                commas.append(position)

        if not commas:
            return cls(_parse_int(body))
        if len(commas) != 2:
            return None

        first, second = commas
        node = cls(_parse_int(body[:first]))
        node.left = cls.parse(body[first + 1 : second])
        node.right = cls.parse(body[second + 1 :])
        return node


def _find_violation(
    node: Node | None,
    low: Node | None,
    high: Node | None,
    visited: set[Node],
) -> Node | None:
    if node is None:
        return None
    if any(child is not None and child in visited for child in (node.left, node.right)):
        return node
    visited.add(node)

    if (low is not None and node.key < low.key) or (
        high is not None and node.key > high.key
    ):
        return node

    left_violation = _find_violation(node.left, low, node, visited)
    if left_violation is not None:
        return left_violation
    return _find_violation(node.right, node, high, visited)


def check_bst_validity(root: Node | None) -> Node | None:
    """Return the first node that breaks the search-tree rules, or ``None``.

    A node breaks the rules if its key is below a left-bounding ancestor's
    key or above a right-bounding ancestor's key, or if one of its children
    refers to a node already visited during the preorder walk.
    """
    return _find_violation(root, None, None, set())