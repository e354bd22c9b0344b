"""Terminal consumers - drive an iterator to exhaustion.

Consumers return the iterator's error instead of raising it. Exceptions
raised by user callbacks propagate unchanged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from pullstream.kernel.channel import Channel
from pullstream.kernel.iterable import PullIterator
from pullstream.kernel.trace import Trace

T = TypeVar("T")
A = TypeVar("A")

ForEachFunc = Callable[[T], None]
ReduceFunc = Callable[[A, T], A]

logger = logging.getLogger(__name__)


def _drain(
    action: str,
    it: PullIterator[T],
    sink: Callable[[T], Any],
    trace: Trace | None,
) -> Exception | None:
    """Pull every element into sink, recording the run on trace."""
    run_id = trace.open_run(action) if trace is not None else None

    count = 0
    start_time = time.perf_counter()
    try:
        while True:
            value, ok = it.next()
            if not ok:
                break
            sink(value)  # type: ignore[arg-type]
            count += 1
    except Exception as exc:
        if trace is not None:
            trace.fail_run(action, run_id, exc, count)
        raise
    duration_ms = (time.perf_counter() - start_time) * 1000

    err = it.error()
    logger.debug("%s consumed %d elements (error=%r)", action, count, err)
    if trace is not None:
        trace.close_run(action, run_id, count, error=err, duration_ms=duration_ms)
    return err


def for_each(it: PullIterator[T], fn: ForEachFunc[T], *, trace: Trace | None = None) -> Exception | None:
    """Call fn on every element, in pull order, on the calling thread.

    Returns:
        The iterator's error, or None after a clean exhaustion.
    """
    return _drain("for_each", it, fn, trace)


def reduce(
    it: PullIterator[T],
    initial: A,
    fn: ReduceFunc[A, T],
    *,
    trace: Trace | None = None,
) -> tuple[A, Exception | None]:
    """Left-fold every element into an accumulator.

    There is no short-circuit: the whole sequence is consumed, so an
    infinite iterator never returns.

    Args:
        it: Iterator to consume.
        initial: Starting accumulator.
        fn: Called as fn(accumulator, element), returns the new accumulator.

    Returns:
        (final accumulator, the iterator's error)
    """
    acc = initial

    def fold(value: T) -> None:
        nonlocal acc
        acc = fn(acc, value)

    err = _drain("reduce", it, fold, trace)
    return acc, err


def to_list(it: PullIterator[T], *, trace: Trace | None = None) -> tuple[list[T], Exception | None]:
    """Collect every element into a list, in pull order."""
    values: list[T] = []
    err = _drain("to_list", it, values.append, trace)
    return values, err


def to_channel(it: PullIterator[T], channel: Channel[T], *, trace: Trace | None = None) -> Exception | None:
    """Send every element on channel, blocking while it is full.

    The channel is left open; closing it is the caller's job, so several
    calls can feed the same channel.

    Raises:
        ChannelClosedError: If the channel is closed while sending.
    """
    return _drain("to_channel", it, channel.send, trace)
