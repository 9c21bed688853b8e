"""Name rules for lists and todos."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import NAME_MAX_LENGTH, NAME_MIN_LENGTH, TodoList

LIST_NAME_LENGTH_ERROR = (
    f"The list name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters long."
)
LIST_NAME_TAKEN_ERROR = "There is already a list by that name."
TODO_NAME_LENGTH_ERROR = (
    f"The todo must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters long."
)


class NameValidationError(ValueError):
    """Raised when a list or todo name breaks one or more rules."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


def _length_ok(name: str) -> bool:
    return NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH


def validate_list_name(name: str, existing_lists: Iterable[TodoList]) -> Optional[List[str]]:
    """Return error messages for an invalid list name, otherwise ``None``.

    Every rule is checked, so a name can collect more than one message.
    """
    errors: List[str] = []
    if not _length_ok(name):
        errors.append(LIST_NAME_LENGTH_ERROR)
    lowered = name.lower()
    if any(todo_list.name.lower() == lowered for todo_list in existing_lists):
        errors.append(LIST_NAME_TAKEN_ERROR)
    return errors or None


def validate_todo_name(name: str) -> Optional[List[str]]:
    """Return error messages for an invalid todo name, otherwise ``None``."""
    if not _length_ok(name):
        return [TODO_NAME_LENGTH_ERROR]
    return None
