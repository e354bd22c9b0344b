"""Closeable blocking channel for handing values between threads."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from pullstream.kernel.errors import ChannelClosedError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Channel(Generic[T]):
    """A FIFO message-passing primitive with an explicit close signal.

    Semantics:
        - send() blocks while the buffer is full
        - recv() blocks until a value arrives or the channel is closed
        - close() wakes every blocked sender and receiver
        - values sent before close() are still delivered

    The producer owns close(); consumers only receive.

    Attributes:
        maxsize: Buffer bound, 0 for unbounded.
    """

    def __init__(self, maxsize: int | None = None) -> None:
        if maxsize is None:
            from pullstream.config import get_settings

            maxsize = get_settings().channel_maxsize
        if maxsize < 0:
            raise ValueError("maxsize must be non-negative")
        self.maxsize = maxsize
        self._buffer: deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def _full(self) -> bool:
        return self.maxsize > 0 and len(self._buffer) >= self.maxsize

    def send(self, value: T) -> None:
        """Append a value, blocking while the buffer is full.

        Raises:
            ChannelClosedError: If the channel is, or becomes, closed.
        """
        with self._cond:
            while not self._closed and self._full():
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError("send on closed channel", source=self)
            self._buffer.append(value)
            self._cond.notify_all()

    def recv(self) -> tuple[T | None, bool]:
        """Receive the next value.

        Returns:
            (value, True) for a delivered value, (None, False) once the
            channel is closed and drained.
        """
        with self._cond:
            while not self._buffer and not self._closed:
                self._cond.wait()
            if self._buffer:
                value = self._buffer.popleft()
                self._cond.notify_all()
                return value, True
            return None, False

    def close(self) -> None:
        """Close the channel. Closing twice is a no-op."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._cond.notify_all()
        logger.debug("channel closed")

    def __iter__(self) -> Iterator[T]:
        while True:
            value, ok = self.recv()
            if not ok:
                return
            yield value  # type: ignore[misc]
