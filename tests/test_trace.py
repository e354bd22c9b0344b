"""Tests for Trace/Evidence recording of consumer runs."""

import pytest

from pullstream import Evidence, Trace, for_each, from_list, reduce, to_list
from fakes import FakeSource, UpstreamFailed


def test_evidence_creation() -> None:
    evidence = Evidence("to_list")
    assert evidence.action == "to_list"
    assert evidence.parent_id is None
    assert evidence.info == {}


def test_evidence_matches_fields_and_info() -> None:
    evidence = Evidence("reduce", id=3, info={"count": 2})
    assert evidence.matches(action="reduce", count=2)
    assert not evidence.matches(action="reduce", count=5)


def test_consumer_records_begin_and_end() -> None:
    trace = Trace()
    to_list(from_list([1, 2, 3]), trace=trace)

    begin, end = trace.get_events()
    assert begin.action == "to_list_begin"
    assert end.action == "to_list"
    assert end.parent_id == begin.id
    assert end.info == {"count": 3}
    assert end.duration_ms is not None


def test_consumer_records_iterator_error() -> None:
    trace = Trace()
    failure = UpstreamFailed("lost")
    reduce(FakeSource([1], failure=failure), 0, lambda a, b: a + b, trace=trace)

    (end,) = trace.find(action="reduce")
    assert end.info["count"] == 1
    assert end.info["error"] is failure


def test_nested_runs_link_to_parent() -> None:
    trace = Trace()

    def inner(v: int) -> None:
        to_list(from_list([v]), trace=trace)

    for_each(from_list([1, 2]), inner, trace=trace)

    (outer_begin,) = trace.find(action="for_each_begin")
    nested = [e.action for e in trace.children(outer_begin.id)]
    assert nested == ["to_list_begin", "to_list_begin", "for_each"]


def test_callback_failure_recorded() -> None:
    trace = Trace()

    def fail(_: int) -> None:
        raise RuntimeError("callback failed")

    with pytest.raises(RuntimeError):
        for_each(from_list([1]), fail, trace=trace)

    (err,) = trace.find(action="for_each_error")
    assert err.info == {"error": "callback failed", "count": 0}


def test_disabled_trace_records_nothing() -> None:
    trace = Trace(enabled=False)
    to_list(from_list([1]), trace=trace)
    assert len(trace) == 0


def test_clear_resets_ids() -> None:
    trace = Trace()
    trace.record("a")
    trace.clear()
    assert len(trace) == 0
    assert trace.record("b") == 0


def test_clear_drops_open_runs() -> None:
    trace = Trace()
    trace.open_run("to_list")
    trace.clear()
    assert trace.record("a") == 0
    assert trace.get_events()[0].parent_id is None


def test_closed_run_stops_parenting() -> None:
    trace = Trace()
    run_id = trace.open_run("reduce")
    assert trace.record("inside") is not None
    trace.close_run("reduce", run_id, count=0)
    after = trace.record("after")

    assert [e.action for e in trace.children(run_id)] == ["inside", "reduce"]
    assert trace.get_events()[after].parent_id is None
    assert [e.action for e in trace.children(None)] == ["reduce_begin", "after"]


def test_disabled_trace_runs_return_none() -> None:
    trace = Trace(enabled=False)
    run_id = trace.open_run("to_list")
    assert run_id is None
    assert trace.close_run("to_list", run_id, count=1) is None
    assert len(trace) == 0
