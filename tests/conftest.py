"""Test fixtures for TaskBoard."""

import pytest
from fakes import FakeClock
from fastapi.testclient import TestClient

from task_board.factory import create_app
from task_board.store import TaskStore


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> TaskStore:
    """Create empty store driven by the fake clock."""
    return TaskStore(clock=clock)


@pytest.fixture
def test_client(store: TaskStore) -> TestClient:
    """Create test client serving the given store."""
    app = create_app(store)
    return TestClient(app)
