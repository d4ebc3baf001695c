"""Meeting Assistant -- Streamlit UI.

Lists upcoming calendar meetings with their record decision, and lets the
user close action items that a meeting's transcript resolved.
"""

from __future__ import annotations

import asyncio

import streamlit as st

from src.meetings.actions import fetch_meetings, refresh_meetings, update_meeting
from src.meetings.api_client import MeetingsApiClient
from src.meetings.guard import UpdateGuard
from src.meetings.store import MeetingsStore
from src.ui.api_client import check_health, track_completions


async def _run(operation, *args) -> None:  # type: ignore[no-untyped-def]
    async with MeetingsApiClient() as api:
        await operation(store.dispatch, api, *args)


def _on_record_toggle(meeting_id: str) -> None:
    key = f"record-{meeting_id}"
    asyncio.run(_run(update_meeting, st.session_state.update_guard, meeting_id, st.session_state[key]))
    if st.session_state.meetings_store.record_error is not None:
        # Let the toggle fall back to the stored decision.
        del st.session_state[key]


# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Meeting Assistant", layout="wide")

first_run = "meetings_store" not in st.session_state
if first_run:
    st.session_state.meetings_store = MeetingsStore()
    st.session_state.update_guard = UpdateGuard()

store: MeetingsStore = st.session_state.meetings_store
guard: UpdateGuard = st.session_state.update_guard

if first_run:
    asyncio.run(_run(fetch_meetings))

with st.sidebar:
    st.title("Meeting Assistant")
    st.markdown("---")
    page = st.radio(
        "Navigate",
        ["Upcoming Meetings", "Action Items"],
        label_visibility="collapsed",
    )

# ---------------------------------------------------------------------------
# Page: Upcoming Meetings
# ---------------------------------------------------------------------------
if page == "Upcoming Meetings":
    st.header("Upcoming Meetings")

    if st.button("Refresh", disabled=store.state.refresh):
        with st.spinner("Syncing calendar..."):
            asyncio.run(_run(refresh_meetings))
        for key in [k for k in st.session_state if str(k).startswith("record-")]:
            del st.session_state[key]

    state = store.state
    if state.error is not None:
        st.error(f"Could not load meetings: {state.error}")
    elif not state.data:
        st.info("No upcoming meetings.")
    else:
        for meeting in state.data:
            meeting_id = str(meeting.get("id", ""))
            col_a, col_b = st.columns([4, 1])
            col_a.write(f"**{meeting.get('title') or 'Untitled'}** -- {meeting.get('start_time', 'N/A')}")
            col_b.toggle(
                "Record",
                value=bool(meeting.get("should_record")),
                key=f"record-{meeting_id}",
                disabled=meeting_id in guard,
                on_change=_on_record_toggle,
                args=(meeting_id,),
            )

    if store.record_error is not None:
        st.error(f"Could not update meeting: {store.record_error}")

# ---------------------------------------------------------------------------
# Page: Action Items
# ---------------------------------------------------------------------------
elif page == "Action Items":
    st.header("Action Items")
    st.write("Mark pending action items completed when the transcript says they are done.")

    meeting_id = st.text_input("Meeting ID")
    if st.button("Check transcript", disabled=not meeting_id):
        if not check_health():
            st.error("Cannot check: the API server is not reachable.")
        else:
            result = track_completions(meeting_id)
            if result:
                st.success(f"{result.get('items_completed', 0)} action item(s) completed.")
                for update in result.get("updates", []):
                    st.write(f"- {update['id']} at {update['completed_at']}")
