"""Tests for collection, channel and iterable sources."""

import threading

import pytest

from pullstream import Channel, from_channel, from_error, from_iterable, from_list, from_reverse_list, to_list
from pullstream.sources import CollectionIterator
from fakes import UpstreamFailed, feed_channel


def test_from_list_initial_state() -> None:
    it = from_list([1, 2, 3])
    assert isinstance(it, CollectionIterator)
    assert it.values == (1, 2, 3)
    assert it.index == -1
    assert it.reverse is False


def test_from_reverse_list_initial_state() -> None:
    it = from_reverse_list([1, 2, 3])
    assert it.values == (1, 2, 3)
    assert it.index == 3
    assert it.reverse is True


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]])
def test_forward_reproduces_input(values: list[int]) -> None:
    result, err = to_list(from_list(values))
    assert result == values
    assert err is None


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]])
def test_reverse_reproduces_reversed_input(values: list[int]) -> None:
    result, err = to_list(from_reverse_list(values))
    assert result == values[::-1]
    assert err is None


def test_next_true_n_times_then_false() -> None:
    it = from_list([1, 2, 3])
    assert [it.next()[1] for _ in range(3)] == [True, True, True]
    assert it.next() == (None, False)


def test_exhaustion_is_sticky() -> None:
    for it in (from_list([1, 2]), from_reverse_list([1, 2])):
        to_list(it)
        boundary = it.index
        for _ in range(5):
            assert it.next() == (None, False)
            assert it.error() is None
        assert it.index == boundary


def test_collection_is_snapshotted() -> None:
    values = [1, 2, 3]
    it = from_list(values)
    values.append(4)
    assert to_list(it)[0] == [1, 2, 3]


def test_python_iteration() -> None:
    assert list(from_reverse_list("abc")) == ["c", "b", "a"]
    assert [v * 2 for v in from_list([1, 2])] == [2, 4]


def test_from_channel_reads_until_closed() -> None:
    channel, producer = feed_channel(range(1, 11))
    result, err = to_list(from_channel(channel))
    producer.join(timeout=5)
    assert result == list(range(1, 11))
    assert err is None
    assert not producer.is_alive()


def test_from_channel_blocks_until_value_arrives() -> None:
    channel: Channel[int] = Channel()
    it = from_channel(channel)
    received: list[tuple[int | None, bool]] = []

    consumer = threading.Thread(target=lambda: received.append(it.next()))
    consumer.start()
    consumer.join(timeout=0.05)
    assert consumer.is_alive()

    channel.send(42)
    consumer.join(timeout=5)
    assert received == [(42, True)]


def test_from_channel_closed_and_empty() -> None:
    channel: Channel[int] = Channel()
    channel.close()
    it = from_channel(channel)
    assert it.next() == (None, False)
    assert it.next() == (None, False)
    assert it.error() is None


def test_from_iterable_clean_end() -> None:
    it = from_iterable(x * x for x in range(4))
    assert to_list(it) == ([0, 1, 4, 9], None)
    assert it.next() == (None, False)


def test_from_iterable_captures_failure() -> None:
    failure = UpstreamFailed("connection lost")

    def rows():
        yield 1
        yield 2
        raise failure

    it = from_iterable(rows())
    result, err = to_list(it)
    assert result == [1, 2]
    assert err is failure
    for _ in range(3):
        assert it.next() == (None, False)
        assert it.error() is failure


def test_from_error_is_permanently_failed() -> None:
    failure = UpstreamFailed("iterator not implemented")
    it = from_error(failure)
    assert it.error() is failure
    for _ in range(3):
        assert it.next() == (None, False)
        assert it.error() is failure
