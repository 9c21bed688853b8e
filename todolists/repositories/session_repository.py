"""Todo list repository backed by per-session in-memory state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol

from ..models import Todo, TodoList


class _HasId(Protocol):
    id: int


def next_element_id(elements: Iterable[_HasId]) -> int:
    """Return max existing id + 1, or 1 for an empty collection."""
    return max((element.id for element in elements), default=0) + 1


@dataclass
class SessionState:
    """Lists owned by a single session."""

    lists: List[TodoList] = field(default_factory=list)


class SessionRepository:
    """Repository that edits a session's lists in place."""

    def __init__(self, state: SessionState) -> None:
        self._state = state

    async def list_all(self) -> List[TodoList]:
        return list(self._state.lists)

    async def find_list(self, list_id: int) -> Optional[TodoList]:
        return self._find(list_id)

    async def create_list(self, name: str) -> TodoList:
        todo_list = TodoList(id=next_element_id(self._state.lists), name=name)
        self._state.lists.append(todo_list)
        return todo_list

    async def rename_list(self, list_id: int, new_name: str) -> None:
        todo_list = self._find(list_id)
        if todo_list is not None:
            todo_list.name = new_name

    async def delete_list(self, list_id: int) -> None:
        self._state.lists[:] = [item for item in self._state.lists if item.id != list_id]

    async def add_todo(self, list_id: int, name: str) -> Optional[Todo]:
        todo_list = self._find(list_id)
        if todo_list is None:
            return None
        todo = Todo(id=next_element_id(todo_list.todos), name=name)
        todo_list.todos.append(todo)
        return todo

    async def delete_todo(self, list_id: int, todo_id: int) -> None:
        todo_list = self._find(list_id)
        if todo_list is not None:
            todo_list.todos[:] = [todo for todo in todo_list.todos if todo.id != todo_id]

    async def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> None:
        todo_list = self._find(list_id)
        if todo_list is None:
            return
        todo = todo_list.find_todo(todo_id)
        if todo is not None:
            todo.completed = completed

    async def complete_all(self, list_id: int) -> None:
        todo_list = self._find(list_id)
        if todo_list is None:
            return
        for todo in todo_list.todos:
            todo.completed = True

    def _find(self, list_id: int) -> Optional[TodoList]:
        for todo_list in self._state.lists:
            if todo_list.id == list_id:
                return todo_list
        return None
