"""Todo list data models using Pydantic."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100


class Todo(BaseModel):
    """A single to-do item owned by one list."""

    id: int = Field(..., gt=0)
    name: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    completed: bool = False

    model_config = ConfigDict(from_attributes=True)


class TodoList(BaseModel):
    """A named list of todos kept in insertion order."""

    id: int = Field(..., gt=0)
    name: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    todos: List[Todo] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_complete(self) -> bool:
        """True when the list has todos and every one of them is completed."""
        return bool(self.todos) and all(todo.completed for todo in self.todos)

    def find_todo(self, todo_id: int) -> Optional[Todo]:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None
