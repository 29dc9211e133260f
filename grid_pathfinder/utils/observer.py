"""Runtime observability helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List

# Rolling history of the last 1000 search step durations in seconds
_STEP_HISTORY_LEN = 1000
_step_durations: Deque[float] = deque(maxlen=_STEP_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_step(duration: float) -> None:
    """Append a step ``duration`` in seconds to the rolling history."""

    _step_durations.append(duration)


def average_step_time() -> float | None:
    """Return the mean recorded step duration, or ``None`` without samples."""

    if not _step_durations:
        return None
    return sum(_step_durations) / len(_step_durations)


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


__all__ = [
    "record_step",
    "average_step_time",
    "log_event",
    "_step_durations",
    "_events",
]
