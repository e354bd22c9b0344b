"""Kernel layer - the iterator contract and its runtime primitives."""

from pullstream.kernel.channel import Channel
from pullstream.kernel.errors import ChannelClosedError, IteratorError
from pullstream.kernel.iterable import BaseIterator, PullIterator
from pullstream.kernel.trace import Evidence, Trace

__all__ = [
    "PullIterator",
    "BaseIterator",
    # Channel
    "Channel",
    # Errors
    "IteratorError",
    "ChannelClosedError",
    # Tracing
    "Evidence",
    "Trace",
]
