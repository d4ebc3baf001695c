"""Synchronous dispatch container around ``meetings_reducer``."""

from __future__ import annotations

from collections.abc import Callable

from src.meetings.state import (
    MEETINGS_INITIAL_STATE,
    MeetingsAction,
    MeetingsActionKind,
    MeetingsState,
    meetings_reducer,
)

Listener = Callable[[MeetingsState], None]


class MeetingsStore:
    """Holds the current MeetingsState and notifies listeners on each dispatch.

    The record-decision START/ERROR/FINISH actions leave the reducer state
    untouched; the store keeps ``updating`` and ``record_error`` for them so a
    view can show progress and failures of the record toggle.
    """

    def __init__(self, initial: MeetingsState = MEETINGS_INITIAL_STATE) -> None:
        self.state = initial
        self.updating = False
        self.record_error: BaseException | None = None
        self._listeners: list[Listener] = []

    def dispatch(self, action: MeetingsAction) -> None:
        if action.type == MeetingsActionKind.RECORD_MEETING_START:
            self.updating = True
            self.record_error = None
        elif action.type == MeetingsActionKind.RECORD_MEETING_ERROR:
            self.record_error = action.error
        elif action.type == MeetingsActionKind.RECORD_MEETING_FINISH:
            self.updating = False

        self.state = meetings_reducer(self.state, action)
        for listener in list(self._listeners):
            listener(self.state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
