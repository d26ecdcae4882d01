# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from task_tracker.api.deps import get_task_store
from task_tracker.infra.memory import InMemoryTaskRepository
from task_tracker.main import app
from task_tracker.services.task_store import TaskStore


@pytest.fixture()
def repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def store(repository: InMemoryTaskRepository) -> TaskStore:
    return TaskStore(repository)


@pytest.fixture()
def api_app(store: TaskStore):
    """
    The real FastAPI app with the task store swapped for an in-memory one.

    The same store instance is shared with the test so data can be seeded
    and inspected directly.
    """
    app.dependency_overrides[get_task_store] = lambda: store
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(api_app: FastAPI):
    with TestClient(api_app) as test_client:
        yield test_client
