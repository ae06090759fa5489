"""Task API endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from task_board.api.models import (
    DeleteTaskResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
    task_to_response,
)
from task_board.errors import TaskNotFoundError, TaskValidationError
from task_board.factory import StoreDep
from task_board.models import TaskDraft, TaskPatch

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tasks", response_model=list[TaskResponse])
async def list_tasks(
    store: StoreDep,
    status: str | None = None,
    assignee: str | None = None,
) -> list[TaskResponse]:
    """List tasks in insertion order.

    Args:
        status: Only tasks in this exact status
        assignee: Only tasks whose assignee contains this text (case-insensitive)

    Returns:
        List of tasks matching every given filter
    """
    tasks = store.list_tasks(status=status, assignee=assignee)
    return [task_to_response(task) for task in tasks]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, store: StoreDep) -> TaskResponse:
    """Get a single task.

    Raises:
        HTTPException: If task not found
    """
    try:
        return task_to_response(store.get_task(task_id))
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post("/tasks", response_model=TaskResponse, status_code=201)
async def create_task(request: TaskCreateRequest, store: StoreDep) -> TaskResponse:
    """Create a task. Only title is required.

    Raises:
        HTTPException: If any field is invalid
    """
    fields = request.model_dump(exclude_none=True)
    try:
        task = store.create_task(TaskDraft(**fields))
    except TaskValidationError as e:
        logger.info(f"Rejected new task: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    return task_to_response(task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: TaskUpdateRequest,
    store: StoreDep,
) -> TaskResponse:
    """Update any subset of a task's fields.

    Fields that are absent or null are left untouched.

    Raises:
        HTTPException: If task not found or any provided field is invalid
    """
    patch = TaskPatch(**request.model_dump(exclude_none=True))
    try:
        task = store.update_task(task_id, patch)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except TaskValidationError as e:
        logger.info(f"Rejected update of task {task_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    return task_to_response(task)


@router.delete("/tasks/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(task_id: str, store: StoreDep) -> DeleteTaskResponse:
    """Delete a task.

    Returns:
        Confirmation message and the removed task

    Raises:
        HTTPException: If task not found
    """
    try:
        task = store.delete_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return DeleteTaskResponse(message="Task deleted", deleted_task=task_to_response(task))
