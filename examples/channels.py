"""Bridging iterators and threads through a Channel."""

from __future__ import annotations

import threading

from pullstream import Channel, for_each, from_channel, step_sequence, to_channel


def main() -> None:
    c: Channel[int] = Channel()

    def produce() -> None:
        try:
            for i in range(1, 11):
                c.send(i)
        finally:
            c.close()

    threading.Thread(target=produce).start()
    print("from_channel:")
    _ = for_each(from_channel(c), print)

    # to_channel never closes the channel; the producer does
    out: Channel[int] = Channel(maxsize=1)

    def forward() -> None:
        try:
            _ = to_channel(step_sequence(1, 10, 2), out)
        finally:
            out.close()

    threading.Thread(target=forward).start()
    print("to_channel:")
    for v in out:
        print(v)


if __name__ == "__main__":
    main()
