"""Consumers - terminal operations over any pull iterator."""

from pullstream.kernel.iterable import BaseIterator

from .terminal import ForEachFunc, ReduceFunc, for_each, reduce, to_channel, to_list

BaseIterator.register_op("for_each", for_each)
BaseIterator.register_op("reduce", reduce)
BaseIterator.register_op("to_list", to_list)
BaseIterator.register_op("to_channel", to_channel)

__all__ = [
    "ForEachFunc",
    "ReduceFunc",
    "for_each",
    "reduce",
    "to_list",
    "to_channel",
]
