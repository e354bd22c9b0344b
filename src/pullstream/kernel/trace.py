"""Runtime trace of pipeline runs - separate from iterator state.

Terminal consumers handed a Trace record each run as a begin event
with the outcome nested under it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A recorded pipeline event.

    Attributes:
        action: What ran (e.g., "reduce", "to_channel")
        id: Event id, unique within its Trace
        parent_id: Id of the enclosing event, if any
        timestamp: When the event was recorded
        info: Run details such as the element count and error
        duration_ms: Wall-clock duration of the run
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None

    def matches(self, **criteria: Any) -> bool:
        """Check every criterion against a field or an info entry."""
        return all(
            getattr(self, k, None) == v or self.info.get(k) == v for k, v in criteria.items()
        )


class Trace:
    """Collects Evidence for consumer runs.

    A run is opened with open_run(), which records "<action>_begin" and
    makes it the parent of everything recorded until the run is closed.
    close_run() records "<action>" under it with the run's element count;
    fail_run() records "<action>_error" instead. Runs nest: a consumer
    driven from another consumer's callback lands under the outer run.

    A disabled trace records nothing and returns None for every id.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open_runs: list[int] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an event.

        Args:
            action: What happened (e.g., "to_list")
            info: Additional context
            parent_id: Explicit parent id; defaults to the innermost open run
            duration_ms: Execution duration

        Returns:
            Event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None
        if parent_id is None and self._open_runs:
            parent_id = self._open_runs[-1]
        event = Evidence(
            action=action,
            id=len(self._events),
            parent_id=parent_id,
            info=info or {},
            duration_ms=duration_ms,
        )
        self._events.append(event)
        return event.id

    def open_run(self, action: str) -> int | None:
        """Start a consumer run and return its id."""
        run_id = self.record(f"{action}_begin")
        if run_id is not None:
            self._open_runs.append(run_id)
        return run_id

    def _leave(self, run_id: int | None) -> None:
        if run_id in self._open_runs:
            self._open_runs.remove(run_id)

    def close_run(
        self,
        action: str,
        run_id: int | None,
        count: int,
        error: Exception | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Finish a run that drained its iterator, with its terminal error if any."""
        self._leave(run_id)
        info: dict[str, Any] = {"count": count}
        if error is not None:
            info["error"] = error
        return self.record(action, info=info, parent_id=run_id, duration_ms=duration_ms)

    def fail_run(self, action: str, run_id: int | None, exc: Exception, count: int) -> int | None:
        """Finish a run aborted by a callback exception."""
        self._leave(run_id)
        return self.record(f"{action}_error", info={"error": str(exc), "count": count}, parent_id=run_id)

    def get_events(self) -> list[Evidence]:
        """Get all recorded events in recording order."""
        return list(self._events)

    def find(self, **criteria: Any) -> list[Evidence]:
        """Get the events matching all criteria (e.g., action="reduce")."""
        return [e for e in self._events if e.matches(**criteria)]

    def children(self, event_id: int | None) -> list[Evidence]:
        """Get the events recorded directly under event_id (None for top level)."""
        return [e for e in self._events if e.parent_id == event_id]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Drop all events and open runs (for reuse)."""
        self._events.clear()
        self._open_runs.clear()
