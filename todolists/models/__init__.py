"""Domain records for lists and todos."""

from .todo import NAME_MAX_LENGTH, NAME_MIN_LENGTH, Todo, TodoList

__all__ = ["NAME_MAX_LENGTH", "NAME_MIN_LENGTH", "Todo", "TodoList"]
