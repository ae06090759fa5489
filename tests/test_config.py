"""Tests for configuration."""

import pytest

from task_board.config import DEFAULT_STATUS, STATUSES, Config


def test_default_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    assert Config().port == 4000


def test_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8123")
    assert Config().port == 8123


def test_stages_in_display_order() -> None:
    assert STATUSES == (
        "Idea",
        "Assigned",
        "Drafting",
        "Editing",
        "Fact-Check",
        "Scheduled",
        "Published",
    )
    assert DEFAULT_STATUS == "Idea"
