"""Error types raised and carried by pull iterators."""

from __future__ import annotations


class IteratorError(Exception):
    """Base error for failures raised by pullstream components.

    The optional source names the component that failed, for debugging
    a long adapter chain.
    """

    def __init__(self, message: str, source: object | None = None) -> None:
        self.source = source
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, source={self.source!r})"


class ChannelClosedError(IteratorError):
    """Raised when sending on a channel that has already been closed."""
