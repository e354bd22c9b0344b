"""Filter, map and reduce chained over a sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pullstream import Trace, configure_logging, filter_iter, from_iterable, map_iter, reduce, sequence


@dataclass(frozen=True)
class Average:
    count: float = 0
    average: float = 0


def average(a: Average, v: float) -> Average:
    return Average(a.count + 1, ((a.average * a.count) + v) / (a.count + 1))


def odd(v: int) -> bool:
    return v % 2 != 0


def read_rows():
    yield 1
    yield 2
    raise ConnectionError("connection reset while reading rows")


def main() -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    configure_logging()

    print("odd numbers doubled:")
    sequence(1, 10).filter(odd).map(lambda v: v * 2).for_each(print)

    trace = Trace()
    avg, _ = reduce(map_iter(sequence(1, 11), float), Average(), average, trace=trace)
    print(f"average of 1..11: {avg.average:g}")
    for ev in trace.get_events():
        print(f"  trace: {ev.action} {ev.info}")

    total, err = reduce(filter_iter(from_iterable(read_rows()), odd), 0, lambda a, b: a + b)
    print(f"partial sum {total}, error: {err!r}")


if __name__ == "__main__":
    main()
