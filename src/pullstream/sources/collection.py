"""In-memory collection sources, forward and reverse."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from pullstream.kernel.iterable import BaseIterator

T = TypeVar("T")


class CollectionIterator(BaseIterator[T]):
    """Cursor over a snapshot of an ordered collection.

    The reverse flag selects both the starting position (before the first
    element, or after the last) and the direction the cursor moves. Once
    the cursor passes the boundary it stays clamped there.

    Attributes:
        values: Snapshot of the collection.
        index: Cursor position, -1 or len(values) before the first pull.
        reverse: Whether iteration runs last to first.
    """

    def __init__(self, values: Iterable[T], reverse: bool = False) -> None:
        self.values: tuple[T, ...] = tuple(values)
        self.reverse = reverse
        self.index = len(self.values) if reverse else -1

    def next(self) -> tuple[T | None, bool]:
        if self.reverse:
            if self.index <= 0:
                self.index = -1
                return None, False
            self.index -= 1
        else:
            if self.index >= len(self.values) - 1:
                self.index = len(self.values)
                return None, False
            self.index += 1
        return self.values[self.index], True

    def __repr__(self) -> str:
        return f"CollectionIterator(index={self.index}, reverse={self.reverse}, size={len(self.values)})"


def from_list(values: Iterable[T]) -> CollectionIterator[T]:
    """Iterate a collection first to last."""
    return CollectionIterator(values)


def from_reverse_list(values: Iterable[T]) -> CollectionIterator[T]:
    """Iterate a collection last to first."""
    return CollectionIterator(values, reverse=True)
