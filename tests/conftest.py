"""
Pytest configuration and fixtures
"""

import pytest
from datetime import date, datetime, timezone
from fastapi.testclient import TestClient
from todo_tracker.models.task import Task
from todo_tracker.services.memory_store import MemoryStore
from todo_tracker.services.task_manager import TaskManager
from todo_tracker.web.main import create_app

TODAY = date(2023, 1, 2)
NOW = datetime(2023, 1, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def today():
    """Pinned current date"""
    return TODAY


@pytest.fixture
def todo_file(tmp_path):
    """Path of a task file that does not exist yet"""
    return tmp_path / "todos.json"


@pytest.fixture
def task_manager(todo_file):
    """Task manager on a temporary file with a pinned date"""
    return TaskManager(todo_file, today_provider=lambda: TODAY, color=False)


@pytest.fixture
def sample_tasks():
    """Three tasks in insertion order (not sorted)"""
    return [
        Task(title="write report", due_date="2023-01-05", created_at=NOW),
        Task(title="buy milk", due_date="2023-01-02", created_at=NOW),
        Task(title="call mom", due_date="2023-01-02", completed=True, created_at=NOW, completed_at=NOW),
    ]


@pytest.fixture
def memory_store():
    """Empty in-memory store"""
    return MemoryStore()


@pytest.fixture
def client(memory_store):
    """Test client for the HTTP service backed by `memory_store`"""
    with TestClient(create_app(memory_store)) as test_client:
        yield test_client
