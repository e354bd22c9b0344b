"""Pull iterator contract - the one abstraction every component satisfies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# Extension registry - class-level storage for fluent iterator operations
_extensions_registry: dict[str, Callable[..., Any]] = {}


@runtime_checkable
class PullIterator(Protocol[T_co]):
    """Structural contract for pull-based iterators.

    Semantics:
        - next() returns (value, True) while elements remain
        - next() returns (None, False) once exhausted, forever after
        - error() returns the terminal error, or None while open or
          after a clean exhaustion
        - error() being set implies next() keeps returning False
    """

    def next(self) -> tuple[T_co | None, bool]:
        """Pull the next element."""
        ...

    def error(self) -> Exception | None:
        """Return the terminal error, if any."""
        ...


class BaseIterator(ABC, Generic[T]):
    """Base class for the concrete iterator variants.

    Adds Python iteration on top of next(), and fluent chaining through
    operations registered with register_op() (filter, map, for_each, ...).
    Python iteration stops at exhaustion and never raises the stored
    error; check error() afterwards.
    """

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register a fluent operation on every iterator.

        Args:
            name: The method name (e.g., "filter")
            fn: Function taking the iterator as its first argument
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered fluent operations."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    @abstractmethod
    def next(self) -> tuple[T | None, bool]:
        """Pull the next element.

        Returns:
            (value, True) if an element was produced, (None, False) once
            the sequence is exhausted, cleanly or with an error.
        """

    def error(self) -> Exception | None:
        """Return the terminal error. Sources that cannot fail keep the default."""
        return None

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value, ok = self.next()
        if not ok:
            raise StopIteration
        return value  # type: ignore[return-value]
