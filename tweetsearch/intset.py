"""A set of integers backed by an AVL tree, with set algebra."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tweetsearch.avl import AVLTree


class IntSet:
    """An ordered set of distinct integers."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._tree = AVLTree(values)

    def add(self, value: int) -> bool:
        """Add a value; return False if it was already present."""
        return self._tree.insert(value)

    def discard(self, value: int) -> bool:
        """Remove a value; return False if it was not present."""
        return self._tree.remove(value)

    def __contains__(self, value: object) -> bool:
        return value in self._tree

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[int]:
        return iter(self._tree)

    def union(self, other: IntSet) -> IntSet:
        result = IntSet(self)
        for value in other:
            result.add(value)
        return result

    def intersection(self, other: IntSet) -> IntSet:
        smaller, larger = (self, other) if len(self) < len(other) else (other, self)
        return IntSet(value for value in smaller if value in larger)

    def difference(self, other: IntSet) -> IntSet:
        return IntSet(value for value in self if value not in other)

    def format(self) -> str:
        """Render the members in ascending order, each followed by ', '."""
        return "".join(f"{value}, " for value in self)

    __or__ = union
    __and__ = intersection
    __sub__ = difference

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"IntSet({list(self)!r})"


def evaluate(left: IntSet, operator: str, right: IntSet) -> IntSet:
    """Combine two sets with AND (intersection), OR (union) or NOT (difference)."""
    if operator == "AND":
        return left.intersection(right)
    if operator == "OR":
        return left.union(right)
    if operator == "NOT":
        return left.difference(right)
    raise ValueError(f"unknown operator {operator!r}; use AND, OR or NOT")