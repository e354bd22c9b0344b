"""Generators - iterators that produce values procedurally."""

from .generate import Generator, GeneratorFunc, generate
from .sequence import SequenceBounds, sequence, step_sequence

__all__ = [
    "Generator",
    "GeneratorFunc",
    "SequenceBounds",
    "generate",
    "sequence",
    "step_sequence",
]
