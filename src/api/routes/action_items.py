"""Action-item endpoints: infer completions from meeting transcripts."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from src.api.models import (
    CompletionsResponse,
    CompletionUpdateResponse,
    DetectCompletionsRequest,
)
from src.tracking.detector import detect_completions
from src.tracking.models import ActionItem, CompletionUpdate
from src.tracking.storage import get_meeting, get_supabase_client, track_completions

router = APIRouter()


def _to_response(meeting_id: str | None, updates: list[CompletionUpdate]) -> CompletionsResponse:
    return CompletionsResponse(
        meeting_id=meeting_id,
        items_completed=len(updates),
        updates=[
            CompletionUpdateResponse(id=u.id, status=u.status, completed_at=u.completed_at)
            for u in updates
        ],
    )


@router.post("/api/action-items/detect-completions", response_model=CompletionsResponse)
async def detect(request: DetectCompletionsRequest) -> CompletionsResponse:
    """Detect completed action items in a transcript without storing anything."""
    items = [ActionItem(id=i.id, text=i.text, status=i.status) for i in request.action_items]
    return _to_response(None, detect_completions(items, request.transcript))


@router.post(
    "/api/meetings/{meeting_id}/action-items/completions",
    response_model=CompletionsResponse,
)
async def complete_meeting_action_items(meeting_id: str) -> CompletionsResponse:
    """Mark the meeting's pending action items that its transcript resolves."""
    client = get_supabase_client()
    meeting = get_meeting(client, meeting_id)
    if meeting is None:
        raise HTTPException(status_code=404, detail="Meeting not found")

    transcript = meeting.get("raw_transcript")
    if not transcript:
        raise HTTPException(status_code=400, detail="Meeting has no transcript to check")

    updates = track_completions(client, meeting_id, str(transcript))
    return _to_response(meeting_id, updates)
