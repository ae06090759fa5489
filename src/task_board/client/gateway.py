"""Gateways the board uses to reach the task store."""

import logging
from typing import Any, Protocol

import httpx

from task_board.api.models import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
    task_to_response,
)
from task_board.config import STATUSES
from task_board.errors import TaskNotFoundError, TaskValidationError
from task_board.models import TaskDraft, TaskPatch
from task_board.store import TaskStore

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A board call failed.

    ``status_code`` is None when the server could not be reached at all.
    """

    def __init__(self, status_code: int | None, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TaskGateway(Protocol):
    """Protocol for reaching the task store."""

    def list_statuses(self) -> list[str]:
        """List workflow stages in display order."""
        ...

    def list_tasks(self) -> list[TaskResponse]:
        """List all tasks in insertion order."""
        ...

    def create_task(self, request: TaskCreateRequest) -> TaskResponse:
        """Create a task and return it."""
        ...

    def update_task(self, task_id: str, request: TaskUpdateRequest) -> TaskResponse:
        """Update a task and return it."""
        ...

    def delete_task(self, task_id: str) -> TaskResponse:
        """Delete a task and return the removed record."""
        ...


class HttpTaskGateway:
    """Gateway talking to the task API over HTTP."""

    def __init__(self, client: httpx.Client) -> None:
        """Initialize gateway with an httpx client whose base_url points at the API."""
        self._client = client

    @classmethod
    def connect(cls, base_url: str, timeout: float = 10.0) -> "HttpTaskGateway":
        """Create a gateway with its own client."""
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self._client.close()

    def list_statuses(self) -> list[str]:
        statuses: list[str] = self._request("GET", "/api/statuses")
        return statuses

    def list_tasks(self) -> list[TaskResponse]:
        data = self._request("GET", "/tasks")
        return [TaskResponse.model_validate(item) for item in data]

    def create_task(self, request: TaskCreateRequest) -> TaskResponse:
        data = self._request("POST", "/tasks", json=_to_json(request))
        return TaskResponse.model_validate(data)

    def update_task(self, task_id: str, request: TaskUpdateRequest) -> TaskResponse:
        data = self._request("PUT", f"/tasks/{task_id}", json=_to_json(request))
        return TaskResponse.model_validate(data)

    def delete_task(self, task_id: str) -> TaskResponse:
        data = self._request("DELETE", f"/tasks/{task_id}")
        return TaskResponse.model_validate(data["deletedTask"])

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"[HttpTaskGateway] {method} {url} failed: {e}")
            raise ApiError(None, f"Server unreachable: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"[HttpTaskGateway] {method} {url} -> {response.status_code}: {message}")
            raise ApiError(response.status_code, message)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"[HttpTaskGateway] {method} {url} returned a body that is not JSON")
            raise ApiError(response.status_code, "Server returned an invalid response") from e


class LocalTaskGateway:
    """Gateway calling a TaskStore in-process.

    Offline mode: the board works without a server, nothing is shared.
    """

    def __init__(self, store: TaskStore | None = None) -> None:
        self._store = store if store is not None else TaskStore()

    def list_statuses(self) -> list[str]:
        return list(STATUSES)

    def list_tasks(self) -> list[TaskResponse]:
        return [task_to_response(task) for task in self._store.list_tasks()]

    def create_task(self, request: TaskCreateRequest) -> TaskResponse:
        try:
            task = self._store.create_task(TaskDraft(**request.model_dump(exclude_none=True)))
        except TaskValidationError as e:
            raise ApiError(400, str(e)) from e
        return task_to_response(task)

    def update_task(self, task_id: str, request: TaskUpdateRequest) -> TaskResponse:
        patch = TaskPatch(**request.model_dump(exclude_none=True))
        try:
            task = self._store.update_task(task_id, patch)
        except TaskNotFoundError as e:
            raise ApiError(404, str(e)) from e
        except TaskValidationError as e:
            raise ApiError(400, str(e)) from e
        return task_to_response(task)

    def delete_task(self, task_id: str) -> TaskResponse:
        try:
            return task_to_response(self._store.delete_task(task_id))
        except TaskNotFoundError as e:
            raise ApiError(404, str(e)) from e


def _to_json(request: TaskCreateRequest | TaskUpdateRequest) -> dict[str, Any]:
    return request.model_dump(by_alias=True, exclude_none=True)


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    detail = data.get("detail") if isinstance(data, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"Request failed with status {response.status_code}"
