"""Transform adapters: filter and map."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from pullstream.kernel.iterable import BaseIterator, PullIterator

T = TypeVar("T")
R = TypeVar("R")

PredicateFunc = Callable[[T], bool]
MapFunc = Callable[[T], R]


class FilterIterator(BaseIterator[T]):
    """Yields the upstream elements for which the predicate holds.

    Semantics:
        - Pulls upstream until an element passes or upstream is exhausted
        - A single next() may pull any number of upstream elements
        - error() is upstream's error
    """

    def __init__(self, upstream: PullIterator[T], predicate: PredicateFunc[T]) -> None:
        self.upstream = upstream
        self._predicate = predicate

    def next(self) -> tuple[T | None, bool]:
        while True:
            value, ok = self.upstream.next()
            if not ok:
                return None, False
            if self._predicate(value):  # type: ignore[arg-type]
                return value, True

    def error(self) -> Exception | None:
        return self.upstream.error()


class MapIterator(BaseIterator[R], Generic[T, R]):
    """Applies fn to each upstream element, one pull per next()."""

    def __init__(self, upstream: PullIterator[T], fn: MapFunc[T, R]) -> None:
        self.upstream = upstream
        self._fn = fn

    def next(self) -> tuple[R | None, bool]:
        value, ok = self.upstream.next()
        if not ok:
            return None, False
        return self._fn(value), True  # type: ignore[arg-type]

    def error(self) -> Exception | None:
        return self.upstream.error()


def filter_iter(upstream: PullIterator[T], predicate: PredicateFunc[T]) -> FilterIterator[T]:
    """Keep only the elements for which predicate returns True.

    Args:
        upstream: Iterator to pull from.
        predicate: Called once per upstream element.

    Returns:
        FilterIterator over upstream.
    """
    return FilterIterator(upstream, predicate)


def map_iter(upstream: PullIterator[T], fn: MapFunc[T, R]) -> MapIterator[T, R]:
    """Transform each element with fn. The element type may change.

    Args:
        upstream: Iterator to pull from.
        fn: Called once per upstream element.

    Returns:
        MapIterator over upstream.
    """
    return MapIterator(upstream, fn)
