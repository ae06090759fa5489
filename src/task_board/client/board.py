"""Board model: tasks grouped into stage columns, kept in sync with the store."""

import logging
from collections.abc import Callable
from enum import Enum

from task_board.api.models import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from task_board.client.gateway import ApiError, TaskGateway
from task_board.client.state import DragController, FormError, TaskDialog
from task_board.config import STATUSES

logger = logging.getLogger(__name__)


class ReconcilePolicy(Enum):
    """How the board catches up after a successful mutation."""

    REFETCH = "refetch"  # replace the whole list with a fresh fetch
    MERGE = "merge"  # patch only the affected task by id


class Board:
    """Client-side view of the task board.

    ``tasks`` always holds the last list known to be good. Failed calls set
    ``error`` and leave ``tasks`` alone; ``retry()`` clears the error and
    reloads.
    """

    def __init__(
        self,
        gateway: TaskGateway,
        policy: ReconcilePolicy = ReconcilePolicy.REFETCH,
    ) -> None:
        self.gateway = gateway
        self.policy = policy
        self.statuses: list[str] = list(STATUSES)
        self.tasks: list[TaskResponse] = []
        self.error: ApiError | None = None
        self.loaded = False
        self.dialog = TaskDialog()
        self.drag = DragController()

    # Reading

    def load(self) -> bool:
        """Fetch the stage list and every task."""
        try:
            statuses = self.gateway.list_statuses()
        except ApiError as e:
            return self._fail("load statuses", e)
        if list(statuses) != list(STATUSES):
            logger.error(f"[Board] Server stages {statuses} do not match {list(STATUSES)}")
        self.statuses = list(statuses)
        return self.refresh()

    def refresh(self) -> bool:
        """Replace the local list with the server's."""
        try:
            self.tasks = self.gateway.list_tasks()
        except ApiError as e:
            return self._fail("fetch tasks", e)
        self.loaded = True
        self.error = None
        return True

    def retry(self) -> bool:
        """Clear the error and reload."""
        self.error = None
        return self.load()

    def find(self, task_id: str) -> TaskResponse | None:
        return next((task for task in self.tasks if task.id == task_id), None)

    def columns(self) -> dict[str, list[TaskResponse]]:
        """Tasks grouped by stage, columns in stage order, tasks in list order."""
        columns: dict[str, list[TaskResponse]] = {status: [] for status in self.statuses}
        for task in self.tasks:
            if task.status in columns:
                columns[task.status].append(task)
            else:
                logger.warning(f"[Board] Task {task.id} has unknown status {task.status!r}")
        return columns

    # Dialog

    def open_new_task(self) -> None:
        self.dialog.open_create(status=self.statuses[0])

    def open_task(self, task_id: str) -> None:
        """Open the edit dialog for a card.

        Raises:
            KeyError: If the board does not hold this task
        """
        task = self.find(task_id)
        if task is None:
            raise KeyError(task_id)
        self.dialog.open_edit(task)

    def submit_dialog(self) -> bool:
        """Send the dialog form; the dialog closes only on success.

        A blank title is rejected here without any server call.
        """
        try:
            request = self.dialog.submit()
        except FormError as e:
            self.dialog.error = str(e)
            return False

        if isinstance(request, TaskCreateRequest):
            create = request
            ok = self._mutate("create task", lambda: self.gateway.create_task(create))
        else:
            update, task_id = request, self.dialog.task_id or ""
            ok = self._mutate("update task", lambda: self.gateway.update_task(task_id, update))

        if ok:
            self.dialog.close()
        elif self.error is not None:
            self.dialog.error = self.error.message
        return ok

    # Cards

    def delete_task(self, task_id: str) -> bool:
        return self._mutate(
            "delete task", lambda: self.gateway.delete_task(task_id), removed=True
        )

    def start_drag(self, task_id: str) -> None:
        """Pick up a card. Unknown ids are ignored."""
        task = self.find(task_id)
        if task is not None:
            self.drag.start(task.id, task.status)

    def drop_on(self, status: str) -> bool:
        """Drop the dragged card on a column.

        Returns:
            True only if a status change was sent and accepted
        """
        change = self.drag.drop(status)
        if change is None:
            return False
        request = TaskUpdateRequest(status=change.status)
        return self._mutate(
            "move task", lambda: self.gateway.update_task(change.task_id, request)
        )

    def cancel_drag(self) -> None:
        self.drag.release()

    # Reconciliation

    def _mutate(
        self,
        action: str,
        call: Callable[[], TaskResponse],
        removed: bool = False,
    ) -> bool:
        try:
            task = call()
        except ApiError as e:
            return self._fail(action, e)

        # The mutation stands even if the follow-up fetch fails
        if self.policy is ReconcilePolicy.REFETCH:
            self.refresh()
        else:
            self._merge(task, removed)
            self.error = None
        return True

    def _merge(self, task: TaskResponse, removed: bool) -> None:
        if removed:
            self.tasks = [t for t in self.tasks if t.id != task.id]
            return
        for index, existing in enumerate(self.tasks):
            if existing.id == task.id:
                self.tasks[index] = task
                return
        self.tasks.append(task)

    def _fail(self, action: str, error: ApiError) -> bool:
        logger.warning(f"[Board] Failed to {action}: {error.message}")
        self.error = error
        return False
