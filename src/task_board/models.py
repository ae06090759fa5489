"""Domain models for TaskBoard."""

from dataclasses import dataclass, fields
from datetime import datetime

from task_board.config import DEFAULT_STATUS


@dataclass
class Task:
    """A unit of content work tracked through the pipeline."""

    id: str
    title: str
    description: str
    assignee: str
    due_date: str  # ISO 8601 date or empty
    status: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskDraft:
    """Fields accepted when creating a task. Title is checked by the store."""

    title: str | None = None
    description: str = ""
    assignee: str = ""
    due_date: str = ""
    status: str = DEFAULT_STATUS


@dataclass(frozen=True)
class TaskPatch:
    """Partial update of a task. ``None`` means the field is left untouched.

    id, created_at and updated_at cannot be patched.
    """

    title: str | None = None
    description: str | None = None
    assignee: str | None = None
    due_date: str | None = None
    status: str | None = None

    def provided(self) -> dict[str, str]:
        """Return only the fields that carry a value."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
