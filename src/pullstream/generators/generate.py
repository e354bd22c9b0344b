"""Custom closure-driven generator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, TypeVar

from pydantic import Field, validate_call

from pullstream.kernel.iterable import BaseIterator

T = TypeVar("T")

# (previous value, 1-based count, repeat) -> next value
GeneratorFunc = Callable[[T, int, int], T]


class Generator(BaseIterator[T]):
    """Produces repeat values by feeding each result back into fn.

    Attributes:
        previous: Last produced value, the seed before the first pull.
        count: Number of values produced so far.
        repeat: Total number of values to produce.
    """

    def __init__(self, seed: T, repeat: int, fn: GeneratorFunc[T]) -> None:
        self.previous = seed
        self.count = 0
        self.repeat = repeat
        self._fn = fn

    def next(self) -> tuple[T | None, bool]:
        if self.count >= self.repeat:
            return None, False
        self.count += 1
        self.previous = self._fn(self.previous, self.count, self.repeat)
        return self.previous, True


@validate_call
def _check_repeat(repeat: Annotated[int, Field(strict=True, ge=0)]) -> int:
    return repeat


def generate(seed: T, repeat: int, fn: GeneratorFunc[T]) -> Generator[T]:
    """Create a generator from a seed, a repeat bound and a function.

    Args:
        seed: Value passed as "previous" to the first call of fn.
        repeat: Number of values to produce (must be >= 0).
        fn: Called as fn(previous, count, repeat) with count starting at 1.

    Returns:
        Generator producing fn's results.

    Raises:
        ValueError: If repeat is negative or not an integer.
    """
    return Generator(seed, _check_repeat(repeat), fn)
