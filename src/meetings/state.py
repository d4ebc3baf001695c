"""Meeting list state and its reducer.

The state tracks two independent in-flight flags: ``loading`` for the initial
fetch and ``refresh`` for an explicit calendar refresh. ``data`` and ``error``
are mutually exclusive once either request resolves.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

CalendarMeeting = dict[str, Any]


class MeetingsActionKind(str, Enum):
    """Actions understood by ``meetings_reducer``."""

    FETCH_START = "FETCH_START"
    FETCH_SUCCESS = "FETCH_SUCCESS"
    FETCH_ERROR = "FETCH_ERROR"
    FETCH_FINISH = "FETCH_FINISH"

    REFRESH_START = "REFRESH_START"
    REFRESH_SUCCESS = "REFRESH_SUCCESS"
    REFRESH_ERROR = "REFRESH_ERROR"
    REFRESH_FINISH = "REFRESH_FINISH"

    RECORD_MEETING_START = "RECORD_MEETING_START"
    RECORD_MEETING_SUCCESS = "RECORD_MEETING_SUCCESS"
    RECORD_MEETING_ERROR = "RECORD_MEETING_ERROR"
    RECORD_MEETING_FINISH = "RECORD_MEETING_FINISH"


@dataclass(frozen=True)
class MeetingsAction:
    type: MeetingsActionKind | str
    meetings: list[CalendarMeeting] | None = None
    error: BaseException | None = None
    meeting_id: str | None = None
    meeting: CalendarMeeting | None = None


@dataclass(frozen=True)
class MeetingsState:
    loading: bool
    refresh: bool
    data: list[CalendarMeeting] | None = None
    error: BaseException | None = None


MEETINGS_INITIAL_STATE = MeetingsState(loading=True, refresh=False)


def _replace_meeting(
    data: list[CalendarMeeting] | None, updated: CalendarMeeting | None
) -> list[CalendarMeeting] | None:
    if data is None:
        return None
    updated_id = updated.get("id") if updated else None
    return [updated if updated and m.get("id") == updated_id else m for m in data]


def meetings_reducer(state: MeetingsState, action: MeetingsAction) -> MeetingsState:
    """Return the state that follows ``state`` after ``action``.

    Unrecognised actions, and the record-decision actions other than
    SUCCESS, return ``state`` itself.
    """
    kind = action.type

    if kind == MeetingsActionKind.FETCH_START:
        return replace(state, loading=True)
    if kind == MeetingsActionKind.FETCH_FINISH:
        return replace(state, loading=False)
    if kind == MeetingsActionKind.REFRESH_START:
        return replace(state, refresh=True)
    if kind == MeetingsActionKind.REFRESH_FINISH:
        return replace(state, refresh=False)

    if kind in (MeetingsActionKind.FETCH_SUCCESS, MeetingsActionKind.REFRESH_SUCCESS):
        return replace(state, data=action.meetings, error=None)
    if kind in (MeetingsActionKind.FETCH_ERROR, MeetingsActionKind.REFRESH_ERROR):
        return replace(state, error=action.error, data=None)

    if kind == MeetingsActionKind.RECORD_MEETING_SUCCESS:
        return replace(state, data=_replace_meeting(state.data, action.meeting))

    return state
