"""Shared fixtures for the todo list tests."""

import pytest
from fastapi.testclient import TestClient

from todolists.repositories import SessionRepository, SessionState
from todolists.services import TodoListService
from todolists.sessions import registry
from todolists.settings import get_settings


@pytest.fixture(autouse=True)
def session_storage_env(monkeypatch):
    """Run every test against session storage with fresh settings."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    get_settings.cache_clear()
    registry.clear()
    yield
    registry.clear()
    get_settings.cache_clear()


@pytest.fixture
def state() -> SessionState:
    """Provide an empty session state."""
    return SessionState()


@pytest.fixture
def repository(state: SessionState) -> SessionRepository:
    """Provide a session repository over the empty state."""
    return SessionRepository(state)


@pytest.fixture
def service(repository: SessionRepository) -> TodoListService:
    """Provide a todo list service backed by session storage."""
    return TodoListService(repository)


@pytest.fixture
def client() -> TestClient:
    """Provide a FastAPI test client."""
    from todolists.main import app

    return TestClient(app)
