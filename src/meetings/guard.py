"""Per-meeting mutual exclusion for update requests."""

from __future__ import annotations


class UpdateGuard:
    """Set of meeting ids with an update request in flight.

    ``acquire`` is a plain check-and-set with no await in between, which is
    enough on a single event loop. A duplicate request for a busy meeting is
    dropped by the caller, not queued.
    """

    def __init__(self) -> None:
        self._in_flight: set[str] = set()

    def acquire(self, meeting_id: str) -> bool:
        if meeting_id in self._in_flight:
            return False
        self._in_flight.add(meeting_id)
        return True

    def release(self, meeting_id: str) -> None:
        self._in_flight.discard(meeting_id)

    def __contains__(self, meeting_id: object) -> bool:
        return meeting_id in self._in_flight

    def __len__(self) -> int:
        return len(self._in_flight)
