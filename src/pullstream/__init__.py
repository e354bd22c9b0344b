import logging

from .combinators import filter_iter, map_iter
from .config import Settings, configure_logging, get_settings, set_settings
from .consumers import for_each, reduce, to_channel, to_list
from .generators import generate, sequence, step_sequence
from .kernel import (
    BaseIterator,
    Channel,
    ChannelClosedError,
    Evidence,
    IteratorError,
    PullIterator,
    Trace,
)
from .sources import from_channel, from_error, from_iterable, from_list, from_reverse_list

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Contract
    "PullIterator",
    "BaseIterator",
    # Sources
    "from_list",
    "from_reverse_list",
    "from_channel",
    "from_iterable",
    "from_error",
    # Generators
    "generate",
    "sequence",
    "step_sequence",
    # Combinators
    "filter_iter",
    "map_iter",
    # Consumers
    "for_each",
    "reduce",
    "to_list",
    "to_channel",
    # Channel & errors
    "Channel",
    "IteratorError",
    "ChannelClosedError",
    # Tracing
    "Evidence",
    "Trace",
    # Config
    "Settings",
    "get_settings",
    "set_settings",
    "configure_logging",
]
