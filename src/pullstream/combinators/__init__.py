"""Combinators - adapters wrapping exactly one upstream iterator."""

from pullstream.kernel.iterable import BaseIterator

from .ops import FilterIterator, MapFunc, MapIterator, PredicateFunc, filter_iter, map_iter

BaseIterator.register_op("filter", filter_iter)
BaseIterator.register_op("map", map_iter)

__all__ = [
    "FilterIterator",
    "MapIterator",
    "PredicateFunc",
    "MapFunc",
    "filter_iter",
    "map_iter",
]
