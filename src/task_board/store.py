"""In-memory task store."""

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import asdict, replace
from datetime import datetime, timedelta, timezone

from task_board.errors import TaskNotFoundError
from task_board.models import Task, TaskDraft, TaskPatch
from task_board.validation import CLEANERS

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_task_id() -> str:
    return str(uuid.uuid4())


class TaskStore:
    """Authoritative in-memory collection of tasks.

    Tasks are kept in insertion order. Every public method holds a single lock,
    so calls never interleave even when handlers run on a thread pool.
    Validation always finishes before the collection is touched.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        """Initialize empty store.

        Args:
            clock: Returns the current time as an aware datetime
            id_factory: Returns a fresh task id
        """
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        self._index: dict[str, Task] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_tasks(self, status: str | None = None, assignee: str | None = None) -> list[Task]:
        """List tasks matching all given filters.

        Args:
            status: Exact status to match
            assignee: Case-insensitive substring of the assignee

        Returns:
            Copies of the matching tasks in insertion order
        """
        needle = assignee.lower() if assignee else None
        with self._lock:
            return [
                replace(task)
                for task in self._tasks
                if (not status or task.status == status)
                and (not needle or needle in task.assignee.lower())
            ]

    def get_task(self, task_id: str) -> Task:
        """Get a copy of a task by id.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        with self._lock:
            return replace(self._lookup(task_id))

    def create_task(self, draft: TaskDraft) -> Task:
        """Validate the draft and append a new task.

        Raises:
            TaskValidationError: If any field is invalid
        """
        values = {name: CLEANERS[name](value) for name, value in asdict(draft).items()}

        with self._lock:
            task_id = self._id_factory()
            while task_id in self._index:
                task_id = self._id_factory()

            now = self._clock()
            task = Task(id=task_id, created_at=now, updated_at=now, **values)
            self._tasks.append(task)
            self._index[task.id] = task
            created = replace(task)

        logger.info(f"[TaskStore] Created task {created.id} ({created.status}): {created.title!r}")
        return created

    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        """Merge the provided patch fields over an existing task.

        Raises:
            TaskNotFoundError: If no task has this id
            TaskValidationError: If any provided field is invalid
        """
        with self._lock:
            task = self._lookup(task_id)
            values = {name: CLEANERS[name](value) for name, value in patch.provided().items()}
            for name, value in values.items():
                setattr(task, name, value)
            task.updated_at = self._next_timestamp(task.updated_at)
            updated = replace(task)

        logger.info(f"[TaskStore] Updated task {task_id}: {sorted(values)}")
        return updated

    def delete_task(self, task_id: str) -> Task:
        """Remove a task and return it.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        with self._lock:
            task = self._lookup(task_id)
            self._tasks.remove(task)
            del self._index[task_id]

        logger.info(f"[TaskStore] Deleted task {task_id}")
        return task

    def clear(self) -> None:
        """Drop every task."""
        with self._lock:
            count = len(self._tasks)
            self._tasks.clear()
            self._index.clear()
        logger.info(f"[TaskStore] Cleared {count} tasks")

    def _lookup(self, task_id: str) -> Task:
        task = self._index.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def _next_timestamp(self, previous: datetime) -> datetime:
        # updated_at must strictly increase even when the clock has not moved
        now = self._clock()
        if now <= previous:
            return previous + timedelta(microseconds=1)
        return now
