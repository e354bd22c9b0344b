"""Sources and generators, printed with for_each.

Errors are ignored here: only iterators with an error state (for example
one reading rows from a database whose connection drops mid-iteration)
can report one, and none of these can.
"""

from __future__ import annotations

from pullstream import for_each, from_list, from_reverse_list, generate, sequence, step_sequence, to_list


def main() -> None:
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]

    print("from_list:")
    _ = for_each(from_list(values), print)

    print("from_reverse_list:")
    _ = for_each(from_reverse_list(values), print)

    # Generators make up data while iterating, no backing list needed
    print("sequence(1, 10):")
    _ = for_each(sequence(1, 10), print)

    print("step_sequence(1, 10, 2) via to_list:")
    odds, _ = to_list(step_sequence(1, 10, 2))
    for v in odds:
        print(v)

    # fn receives the previous value, the 1-based count and the repeat bound
    print("generate(0, 3, counter):")
    _ = for_each(generate(0, 3, lambda p, c, r: p + 1), print)


if __name__ == "__main__":
    main()
