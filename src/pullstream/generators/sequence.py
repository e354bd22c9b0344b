"""Arithmetic integer sequences built on the custom generator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt, model_validator

from .generate import Generator, generate


class SequenceBounds(BaseModel):
    """Validated arguments of an arithmetic sequence.

    A step whose sign disagrees with the start/end ordering describes an
    empty sequence. A zero step is rejected.
    """

    model_config = ConfigDict(frozen=True)

    start: StrictInt
    end: StrictInt
    step: StrictInt = 1

    @model_validator(mode="after")
    def _check_step(self) -> SequenceBounds:
        if self.step == 0:
            raise ValueError("step must not be zero")
        return self

    @property
    def length(self) -> int:
        """Number of values from start to end inclusive."""
        return max(0, (self.end - self.start) // self.step + 1)


def step_sequence(start: int, end: int, step: int) -> Generator[int]:
    """Integers from start towards end, advancing by step.

    end is included when the sequence lands on it exactly.

    Raises:
        ValueError: If step is zero or any argument is not an int.
    """
    bounds = SequenceBounds(start=start, end=end, step=step)
    return generate(bounds.start - bounds.step, bounds.length, lambda p, _c, _r: p + bounds.step)


def sequence(start: int, end: int) -> Generator[int]:
    """Integers from start to end inclusive, ascending or descending.

    Raises:
        ValueError: If either argument is not an int.
    """
    bounds = SequenceBounds(start=start, end=end)
    return step_sequence(bounds.start, bounds.end, 1 if bounds.start <= bounds.end else -1)
