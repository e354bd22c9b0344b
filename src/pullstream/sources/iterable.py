"""Sources over arbitrary Python iterables, and the always-failed source."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from pullstream.kernel.iterable import BaseIterator

T = TypeVar("T")

logger = logging.getLogger(__name__)


class IterableIterator(BaseIterator[T]):
    """Pulls from a Python iterator.

    StopIteration ends the sequence cleanly. Any other exception raised
    by the wrapped iterator becomes the terminal error; the wrapped
    iterator is not touched again afterwards.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it: Iterator[T] | None = iter(iterable)
        self._error: Exception | None = None

    def next(self) -> tuple[T | None, bool]:
        if self._it is None:
            return None, False
        try:
            return next(self._it), True
        except StopIteration:
            self._it = None
        except Exception as exc:
            logger.debug("source failed: %r", exc)
            self._it = None
            self._error = exc
        return None, False

    def error(self) -> Exception | None:
        return self._error


class FailedIterator(BaseIterator[T]):
    """An iterator that is exhausted with an error from the start."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    def next(self) -> tuple[T | None, bool]:
        return None, False

    def error(self) -> Exception | None:
        return self._error


def from_iterable(iterable: Iterable[T]) -> IterableIterator[T]:
    """Wrap any Python iterable, capturing its failure as the terminal error."""
    return IterableIterator(iterable)


def from_error(error: Exception) -> FailedIterator[Any]:
    """Build an iterator permanently in the given error state."""
    return FailedIterator(error)
