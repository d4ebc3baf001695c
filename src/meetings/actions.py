"""Async orchestrations that drive the meeting list through the store.

Each operation dispatches START, then SUCCESS or ERROR, then FINISH. FINISH is
dispatched on every path, cancellation included. Failures are reported
through ERROR rather than raised.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from src.meetings.guard import UpdateGuard
from src.meetings.state import MeetingsAction, MeetingsActionKind

logger = logging.getLogger(__name__)

Dispatch = Callable[[MeetingsAction], None]


class MeetingsApi(Protocol):
    async def list_meetings(self) -> Any: ...

    async def refresh_meetings(self) -> Any: ...

    async def update_meeting(self, meeting_id: str, override_should_record: bool) -> Any: ...


def _as_meetings(response: Any) -> list[dict[str, Any]]:
    return list(response) if isinstance(response, list) else []


async def fetch_meetings(dispatch: Dispatch, api: MeetingsApi) -> None:
    """Load the meeting list, toggling ``loading`` around the request."""
    dispatch(MeetingsAction(type=MeetingsActionKind.FETCH_START))
    try:
        meetings = _as_meetings(await api.list_meetings())
        logger.info("meetings.api_received totalMeetings=%d", len(meetings))
        dispatch(MeetingsAction(type=MeetingsActionKind.FETCH_SUCCESS, meetings=meetings))
    except Exception as exc:
        logger.exception("Fetching meetings failed")
        dispatch(MeetingsAction(type=MeetingsActionKind.FETCH_ERROR, error=exc))
    finally:
        dispatch(MeetingsAction(type=MeetingsActionKind.FETCH_FINISH))


async def refresh_meetings(dispatch: Dispatch, api: MeetingsApi) -> None:
    """Ask the service to resync the calendar, toggling ``refresh``."""
    dispatch(MeetingsAction(type=MeetingsActionKind.REFRESH_START))
    try:
        meetings = _as_meetings(await api.refresh_meetings())
        dispatch(MeetingsAction(type=MeetingsActionKind.REFRESH_SUCCESS, meetings=meetings))
    except Exception as exc:
        logger.exception("Refreshing meetings failed")
        dispatch(MeetingsAction(type=MeetingsActionKind.REFRESH_ERROR, error=exc))
    finally:
        dispatch(MeetingsAction(type=MeetingsActionKind.REFRESH_FINISH))


async def update_meeting(
    dispatch: Dispatch,
    api: MeetingsApi,
    guard: UpdateGuard,
    meeting_id: str,
    override_should_record: bool,
) -> None:
    """Set the record decision for one meeting.

    Returns without dispatching anything if an update for ``meeting_id`` is
    already in flight on ``guard``.
    """
    if not guard.acquire(meeting_id):
        logger.debug("Update already in progress for meeting %s, skipping", meeting_id)
        return

    try:
        dispatch(MeetingsAction(type=MeetingsActionKind.RECORD_MEETING_START, meeting_id=meeting_id))
        try:
            response = await api.update_meeting(meeting_id, override_should_record)
            if isinstance(response, Mapping) and response.get("id"):
                dispatch(
                    MeetingsAction(
                        type=MeetingsActionKind.RECORD_MEETING_SUCCESS,
                        meeting_id=meeting_id,
                        meeting=dict(response),
                    )
                )
        except Exception as exc:
            logger.exception("Updating meeting %s failed", meeting_id)
            dispatch(
                MeetingsAction(
                    type=MeetingsActionKind.RECORD_MEETING_ERROR,
                    meeting_id=meeting_id,
                    error=exc,
                )
            )
        finally:
            dispatch(MeetingsAction(type=MeetingsActionKind.RECORD_MEETING_FINISH, meeting_id=meeting_id))
    finally:
        guard.release(meeting_id)
