"""Pydantic request/response schemas for the action-item API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from src.tracking.models import ActionItemStatus


class ActionItemIn(BaseModel):
    """An action item as submitted for completion detection."""

    id: str | int
    text: str
    status: ActionItemStatus = ActionItemStatus.PENDING


class DetectCompletionsRequest(BaseModel):
    """Request body for the /api/action-items/detect-completions endpoint."""

    action_items: list[ActionItemIn] = []
    transcript: str = ""


class CompletionUpdateResponse(BaseModel):
    """A single inferred completion."""

    id: str | int
    status: ActionItemStatus
    completed_at: datetime


class CompletionsResponse(BaseModel):
    """Response body for the completion endpoints."""

    meeting_id: str | None = None
    items_completed: int
    updates: list[CompletionUpdateResponse] = []
