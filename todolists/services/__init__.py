"""Business logic for todo lists."""

from .todo_service import TodoListService
from .validation import NameValidationError, validate_list_name, validate_todo_name

__all__ = [
    "NameValidationError",
    "TodoListService",
    "validate_list_name",
    "validate_todo_name",
]
