"""Data models for action items and their completion updates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class ActionItemStatus(str, Enum):
    """Lifecycle states of an action item."""

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class ActionItem:
    """A follow-up task extracted from a meeting summary."""

    id: str
    text: str
    status: ActionItemStatus = ActionItemStatus.PENDING
    assignee: str | None = None
    due_date: str | None = None
    completed_at: str | None = None
    completed_by: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> ActionItem:
        """Build an ActionItem from an ``action_items`` table row."""
        return cls(
            id=str(row["id"]),
            text=row.get("text") or "",
            status=ActionItemStatus(row.get("status") or ActionItemStatus.PENDING),
            assignee=row.get("assignee"),
            due_date=row.get("due_date"),
            completed_at=row.get("completed_at"),
            completed_by=row.get("completed_by"),
        )


@dataclass(frozen=True)
class CompletionUpdate:
    """An inferred status change for one action item."""

    id: Any
    completed_at: datetime
    status: ActionItemStatus = ActionItemStatus.COMPLETED

    def to_row(self) -> dict[str, str]:
        """Column patch to apply to the stored action item."""
        return {
            "status": self.status.value,
            "completed_at": self.completed_at.isoformat(),
        }
