"""Tests for the drag and dialog state machines."""

from datetime import datetime, timezone

import pytest

from task_board.api.models import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from task_board.client.state import (
    DialogMode,
    DragController,
    FormError,
    StatusChange,
    TaskDialog,
    TaskForm,
)


@pytest.fixture
def task() -> TaskResponse:
    now = datetime(2025, 3, 1, tzinfo=timezone.utc)
    return TaskResponse(
        id="t-1",
        title="Moon landing recap",
        description="Short piece",
        assignee="Ada",
        due_date="2025-03-10",
        status="Drafting",
        created_at=now,
        updated_at=now,
    )


def test_drag_to_other_status() -> None:
    drag = DragController()
    drag.start("t-1", "Idea")

    assert drag.is_dragging
    assert drag.drop("Editing") == StatusChange(task_id="t-1", status="Editing")
    assert not drag.is_dragging


def test_drag_to_same_status() -> None:
    drag = DragController()
    drag.start("t-1", "Idea")

    assert drag.drop("Idea") is None
    assert not drag.is_dragging


def test_drop_while_idle() -> None:
    assert DragController().drop("Idea") is None


def test_release_outside() -> None:
    drag = DragController()
    drag.start("t-1", "Idea")
    drag.release()

    assert drag.state is None
    assert drag.drop("Editing") is None


def test_new_drag_replaces_old() -> None:
    drag = DragController()
    drag.start("t-1", "Idea")
    drag.start("t-2", "Editing")

    assert drag.drop("Idea") == StatusChange(task_id="t-2", status="Idea")


def test_dialog_create_starts_empty() -> None:
    dialog = TaskDialog()
    assert not dialog.is_open

    dialog.open_create()

    assert dialog.mode is DialogMode.CREATE
    assert dialog.task_id is None
    assert dialog.form == TaskForm()
    assert dialog.form.status == "Idea"


def test_dialog_edit_prefills(task: TaskResponse) -> None:
    dialog = TaskDialog()
    dialog.open_edit(task)

    assert dialog.mode is DialogMode.EDIT
    assert dialog.task_id == "t-1"
    assert dialog.form == TaskForm(
        title="Moon landing recap",
        description="Short piece",
        assignee="Ada",
        due_date="2025-03-10",
        status="Drafting",
    )


def test_dialog_cancel_resets(task: TaskResponse) -> None:
    dialog = TaskDialog()
    dialog.open_edit(task)
    dialog.error = "something"

    dialog.cancel()

    assert not dialog.is_open
    assert dialog.task_id is None
    assert dialog.form == TaskForm()
    assert dialog.error is None


def test_submit_per_mode(task: TaskResponse) -> None:
    dialog = TaskDialog()
    dialog.open_create(status="Assigned")
    dialog.form.title = "New piece"
    create = dialog.submit()

    assert isinstance(create, TaskCreateRequest)
    assert create.model_dump(by_alias=True, exclude_none=True) == {
        "title": "New piece",
        "description": "",
        "assignee": "",
        "dueDate": "",
        "status": "Assigned",
    }

    dialog.open_edit(task)
    update = dialog.submit()
    assert isinstance(update, TaskUpdateRequest)
    assert update.title == "Moon landing recap"


@pytest.mark.parametrize("title", ["", "  \t "])
def test_submit_rejects_blank_title(title: str) -> None:
    dialog = TaskDialog()
    dialog.open_create()
    dialog.form.title = title

    with pytest.raises(FormError, match="Title is required"):
        dialog.submit()


def test_submit_needs_open_dialog() -> None:
    with pytest.raises(FormError):
        TaskDialog().submit()
