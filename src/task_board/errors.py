"""Domain errors for TaskBoard."""


class TaskBoardError(Exception):
    """Base class for task board errors."""


class TaskValidationError(TaskBoardError, ValueError):
    """Task fields failed validation. Nothing was written."""


class TaskNotFoundError(TaskBoardError, LookupError):
    """No live task has the requested id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
