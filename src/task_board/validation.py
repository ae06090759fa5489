"""Field validation and normalization for tasks.

Every function returns the value as it should be stored (trimmed) or raises
TaskValidationError with a message suitable for API clients.
"""

import re
from datetime import date, datetime
from typing import Any

from task_board.config import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH, STATUSES
from task_board.errors import TaskValidationError

# YYYY-MM-DD, optionally followed by THH:MM[:SS[.fff|.ffffff]] and Z or an offset
_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")
_DATE_TIME = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{3}|\.\d{6})?)?(Z|[+-]\d{2}:\d{2})?"
)


def clean_title(value: Any) -> str:
    """Trim the title; it must be non-empty and within the length limit."""
    if not isinstance(value, str) or not value.strip():
        raise TaskValidationError("Title is required and must be a non-empty string")
    title = value.strip()
    if len(title) > MAX_TITLE_LENGTH:
        raise TaskValidationError(f"Title must be {MAX_TITLE_LENGTH} characters or less")
    return title


def clean_description(value: Any) -> str:
    """Trim the description and enforce its length limit."""
    if not isinstance(value, str):
        raise TaskValidationError("Description must be a string")
    description = value.strip()
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise TaskValidationError(
            f"Description must be {MAX_DESCRIPTION_LENGTH} characters or less"
        )
    return description


def clean_assignee(value: Any) -> str:
    """Trim the assignee."""
    if not isinstance(value, str):
        raise TaskValidationError("Assignee must be a string")
    return value.strip()


def clean_due_date(value: Any) -> str:
    """Accept an empty string or anything that parses as an ISO 8601 date."""
    if not isinstance(value, str):
        raise TaskValidationError("Invalid date format for dueDate")
    due_date = value.strip()
    if due_date and not _is_calendar_date(due_date):
        raise TaskValidationError("Invalid date format for dueDate")
    return due_date


def clean_status(value: Any) -> str:
    """Check the status is one of the workflow stages."""
    if value not in STATUSES:
        raise TaskValidationError(f"Invalid status. Must be one of: {', '.join(STATUSES)}")
    return value


def _is_calendar_date(value: str) -> bool:
    if _DATE_ONLY.fullmatch(value):
        try:
            date.fromisoformat(value)
            return True
        except ValueError:
            return False
    if not _DATE_TIME.fullmatch(value):
        return False
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


# Maps TaskPatch/TaskDraft field names to their cleaners.
CLEANERS = {
    "title": clean_title,
    "description": clean_description,
    "assignee": clean_assignee,
    "due_date": clean_due_date,
    "status": clean_status,
}
