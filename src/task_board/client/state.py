"""Board UI state machines: drag-and-drop and the task dialog.

Both are plain objects advanced by method calls, one state update per
transition, so they work with any event source.
"""

from dataclasses import dataclass, field
from enum import Enum

from task_board.api.models import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from task_board.config import DEFAULT_STATUS


class FormError(ValueError):
    """The dialog form cannot be submitted."""


@dataclass(frozen=True)
class StatusChange:
    """A drop that moves a task to another column."""

    task_id: str
    status: str


@dataclass(frozen=True)
class Dragging:
    task_id: str
    from_status: str


class DragController:
    """idle -> dragging(task) -> dropped(status) | released outside -> idle."""

    def __init__(self) -> None:
        self.state: Dragging | None = None

    @property
    def is_dragging(self) -> bool:
        return self.state is not None

    def start(self, task_id: str, status: str) -> None:
        """Pick up a card. A drag already in progress is abandoned."""
        self.state = Dragging(task_id=task_id, from_status=status)

    def drop(self, status: str) -> StatusChange | None:
        """Drop the card on a column.

        Returns:
            The change to apply, or None when idle or dropped on its own column
        """
        current = self.state
        self.state = None
        if current is None or current.from_status == status:
            return None
        return StatusChange(task_id=current.task_id, status=status)

    def release(self) -> None:
        """Card let go outside any column."""
        self.state = None


class DialogMode(Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass
class TaskForm:
    """Editable form fields, kept as the user typed them."""

    title: str = ""
    description: str = ""
    assignee: str = ""
    due_date: str = ""
    status: str = DEFAULT_STATUS

    @classmethod
    def from_task(cls, task: TaskResponse) -> "TaskForm":
        return cls(
            title=task.title,
            description=task.description,
            assignee=task.assignee,
            due_date=task.due_date,
            status=task.status,
        )


@dataclass
class TaskDialog:
    """closed -> open(create, empty) | open(edit, pre-filled) -> closed."""

    mode: DialogMode | None = None
    task_id: str | None = None
    form: TaskForm = field(default_factory=TaskForm)
    error: str | None = None

    @property
    def is_open(self) -> bool:
        return self.mode is not None

    def open_create(self, status: str = DEFAULT_STATUS) -> None:
        self.mode = DialogMode.CREATE
        self.task_id = None
        self.form = TaskForm(status=status)
        self.error = None

    def open_edit(self, task: TaskResponse) -> None:
        self.mode = DialogMode.EDIT
        self.task_id = task.id
        self.form = TaskForm.from_task(task)
        self.error = None

    def close(self) -> None:
        self.mode = None
        self.task_id = None
        self.form = TaskForm()
        self.error = None

    cancel = close

    def submit(self) -> TaskCreateRequest | TaskUpdateRequest:
        """Turn the form into an API request.

        Raises:
            FormError: If the dialog is closed or the title is blank
        """
        if self.mode is None:
            raise FormError("No task dialog is open")
        if not self.form.title.strip():
            raise FormError("Title is required")

        values = {
            "title": self.form.title,
            "description": self.form.description,
            "assignee": self.form.assignee,
            "due_date": self.form.due_date,
            "status": self.form.status,
        }
        if self.mode is DialogMode.CREATE:
            return TaskCreateRequest(**values)
        return TaskUpdateRequest(**values)
