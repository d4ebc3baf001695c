"""Keyword heuristic that infers which pending action items a transcript resolves."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from src.tracking.models import ActionItem, ActionItemStatus, CompletionUpdate

COMPLETION_KEYWORDS: tuple[str, ...] = ("completed", "done", "finished", "resolved", "fixed")

# Number of leading words of the item text that must appear in the transcript.
PHRASE_WORDS = 6


def _field(item: ActionItem | Mapping[str, Any], name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def is_item_completed(item_text: str, transcript: str) -> bool:
    """Return True if the transcript looks like it closes this item.

    Two checks, both case-insensitive:

    1. The transcript contains at least one completion keyword anywhere.
    2. The first six words of the item appear verbatim in the transcript.

    The keyword is not required to be near the phrase, so unrelated mentions
    can produce false positives.
    """
    norm_item = (item_text or "").lower()
    norm_transcript = (transcript or "").lower()
    if not norm_item or not norm_transcript:
        return False

    if not any(keyword in norm_transcript for keyword in COMPLETION_KEYWORDS):
        return False

    phrase = " ".join(norm_item.split()[:PHRASE_WORDS])
    return bool(phrase) and phrase in norm_transcript


def detect_completions(
    action_items: Iterable[ActionItem | Mapping[str, Any]] | None,
    transcript_text: str | None,
    now: datetime | None = None,
) -> list[CompletionUpdate]:
    """Infer completion updates for pending action items from a transcript.

    Args:
        action_items: ActionItem instances or storage rows. ``None`` is treated
            as an empty list.
        transcript_text: The meeting transcript.
        now: Timestamp stamped on every update. Defaults to the current UTC time.

    Returns:
        One CompletionUpdate per resolved item, in input order. Nothing is
        persisted here.
    """
    if not transcript_text:
        return []

    completed_at = now or datetime.now(timezone.utc)

    return [
        CompletionUpdate(id=_field(item, "id"), completed_at=completed_at)
        for item in action_items or []
        if _field(item, "id")
        and _field(item, "status") == ActionItemStatus.PENDING
        and _field(item, "text")
        and is_item_completed(_field(item, "text"), transcript_text)
    ]
