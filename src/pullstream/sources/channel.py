"""Channel-backed source."""

from __future__ import annotations

from typing import TypeVar

from pullstream.kernel.channel import Channel
from pullstream.kernel.iterable import BaseIterator

T = TypeVar("T")


class ChannelIterator(BaseIterator[T]):
    """Receives from a channel until it is closed and drained.

    next() blocks the calling thread while the channel is open and empty.
    Closure is a normal end of sequence, so error() is always None.
    """

    def __init__(self, channel: Channel[T]) -> None:
        self.channel = channel
        self._done = False

    def next(self) -> tuple[T | None, bool]:
        if self._done:
            return None, False
        value, ok = self.channel.recv()
        if not ok:
            self._done = True
            return None, False
        return value, True


def from_channel(channel: Channel[T]) -> ChannelIterator[T]:
    """Iterate the values received on a channel."""
    return ChannelIterator(channel)
