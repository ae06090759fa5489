"""API models for TaskBoard."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from task_board.models import Task


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreateRequest(CamelModel):
    """Request model for creating a task.

    Unknown keys (id, createdAt, ...) are ignored.
    """

    title: str | None = None
    description: str | None = None
    assignee: str | None = None
    due_date: str | None = None
    status: str | None = None


class TaskUpdateRequest(CamelModel):
    """Request model for updating a task. Any subset of fields may be sent."""

    title: str | None = None
    description: str | None = None
    assignee: str | None = None
    due_date: str | None = None
    status: str | None = None


class TaskResponse(CamelModel):
    """API response model for tasks."""

    id: str
    title: str
    description: str
    assignee: str
    due_date: str
    status: str
    created_at: datetime
    updated_at: datetime


class DeleteTaskResponse(CamelModel):
    """API response model for a deleted task."""

    message: str
    deleted_task: TaskResponse


class HealthResponse(BaseModel):
    """API response model for health check."""

    status: str
    tasks: int


def task_to_response(task: Task) -> TaskResponse:
    """Convert Task to TaskResponse."""
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        assignee=task.assignee,
        due_date=task.due_date,
        status=task.status,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )
