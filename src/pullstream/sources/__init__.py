"""Sources - iterators backed by real data."""

from .channel import ChannelIterator, from_channel
from .collection import CollectionIterator, from_list, from_reverse_list
from .iterable import FailedIterator, IterableIterator, from_error, from_iterable

__all__ = [
    "CollectionIterator",
    "ChannelIterator",
    "IterableIterator",
    "FailedIterator",
    "from_list",
    "from_reverse_list",
    "from_channel",
    "from_iterable",
    "from_error",
]
