"""Storage backends for todo lists."""

from .base import TodoRepository
from .database_repository import DatabaseRepository, bool_to_flag, flag_to_bool
from .session_repository import SessionRepository, SessionState, next_element_id

__all__ = [
    "DatabaseRepository",
    "SessionRepository",
    "SessionState",
    "TodoRepository",
    "bool_to_flag",
    "flag_to_bool",
    "next_element_id",
]
