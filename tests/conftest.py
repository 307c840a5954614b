# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from goals.dependencies import get_goal_store
from main import app
from tasks.dependencies import get_task_store

from .fakes import InMemoryGoalStore, InMemoryTaskStore


@pytest.fixture()
def goal_store() -> InMemoryGoalStore:
    return InMemoryGoalStore()


@pytest.fixture()
def task_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def client(goal_store: InMemoryGoalStore, task_store: InMemoryTaskStore):
    """
    TestClient with in-memory stores injected.

    The client is not used as a context manager, so the lifespan (DB pool,
    scheduler) never runs.
    """
    app.dependency_overrides[get_goal_store] = lambda: goal_store
    app.dependency_overrides[get_task_store] = lambda: task_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
