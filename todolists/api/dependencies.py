"""API dependencies for todo list management."""

from typing import AsyncIterator

from fastapi import Depends, Request

from .. import db
from ..logging_utils import reset_list_id, set_list_id
from ..repositories import DatabaseRepository, SessionRepository, SessionState, TodoRepository
from ..services import TodoListService
from ..sessions import registry
from ..settings import Settings, get_settings


def get_app_settings() -> Settings:
    """Dependency for getting process settings."""
    return get_settings()


def get_session_state(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> SessionState:
    """Resolve the caller's session from its cookie, starting one if needed.

    A newly started session id is left on ``request.state.new_session_id``
    for the cookie middleware to send back.
    """
    current_id = request.cookies.get(settings.session_cookie_name)
    session_id, state = registry.get_or_create(
        current_id, ttl_seconds=settings.session_ttl_seconds
    )
    if session_id != current_id:
        request.state.new_session_id = session_id
    return state


def get_todo_repository(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> TodoRepository:
    """Dependency for getting the configured storage backend."""
    if settings.uses_database:
        return DatabaseRepository(db.get_pool())
    return SessionRepository(get_session_state(request, settings))


def get_todo_list_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoListService:
    """Dependency for getting todo list service instance."""
    return TodoListService(repository)


async def bind_list_id(list_id: int) -> AsyncIterator[int]:
    """Expose the path's list id to log records for the rest of the request."""
    token = set_list_id(list_id)
    try:
        yield list_id
    finally:
        reset_list_id(token)
