"""View-model helpers: completion ratios and display order."""

from __future__ import annotations

from typing import Iterable, List

from .models import Todo, TodoList


def is_list_complete(todo_list: TodoList) -> bool:
    return todo_list.is_complete


def todos_remaining_count(todos: Iterable[Todo]) -> int:
    return sum(1 for todo in todos if not todo.completed)


def todo_completion_ratio(todos: List[Todo]) -> str:
    """Return ``"<remaining>/<total>"`` for a list's todos."""
    return f"{todos_remaining_count(todos)}/{len(todos)}"


def sort_lists(lists: Iterable[TodoList]) -> List[TodoList]:
    """Incomplete lists first, complete lists last, insertion order otherwise."""
    return sorted(lists, key=is_list_complete)


def sort_todos(todos: Iterable[Todo]) -> List[Todo]:
    """Open todos first, completed todos last, insertion order otherwise."""
    return sorted(todos, key=lambda todo: todo.completed)
