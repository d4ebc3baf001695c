"""Supabase storage helpers for meetings and action items."""

from __future__ import annotations

import logging
from typing import Any, cast

from supabase import Client, create_client

from src.config import settings
from src.tracking.detector import detect_completions
from src.tracking.models import ActionItem, ActionItemStatus, CompletionUpdate

logger = logging.getLogger(__name__)


def get_supabase_client() -> Client:
    """Create and return a Supabase client from settings."""
    return create_client(settings.supabase_url, settings.supabase_key)


def get_meeting(client: Client, meeting_id: str) -> dict[str, Any] | None:
    """Return the ``meetings`` row for ``meeting_id``, or None if absent."""
    result = client.table("meetings").select("*").eq("id", meeting_id).execute()
    rows = cast(list[dict[str, Any]], result.data)
    return rows[0] if rows else None


def get_pending_action_items(client: Client, meeting_id: str) -> list[ActionItem]:
    """Load the meeting's pending action items, oldest first."""
    result = (
        client.table("action_items")
        .select("*")
        .eq("meeting_id", meeting_id)
        .eq("status", ActionItemStatus.PENDING.value)
        .order("created_at")
        .execute()
    )
    return [ActionItem.from_row(row) for row in cast(list[dict[str, Any]], result.data)]


def apply_completions(client: Client, updates: list[CompletionUpdate]) -> int:
    """Write completion updates to the ``action_items`` table.

    Returns:
        Number of rows updated.
    """
    for update in updates:
        client.table("action_items").update(update.to_row()).eq("id", update.id).execute()
    return len(updates)


def track_completions(client: Client, meeting_id: str, transcript: str) -> list[CompletionUpdate]:
    """Close the meeting's pending action items that the transcript resolves.

    Loads pending items, runs the completion detector and persists the
    resulting updates.

    Returns:
        The applied updates.
    """
    items = get_pending_action_items(client, meeting_id)
    updates = detect_completions(items, transcript)
    apply_completions(client, updates)
    logger.info(
        "Marked %d of %d pending action items completed for meeting %s",
        len(updates),
        len(items),
        meeting_id,
    )
    return updates
