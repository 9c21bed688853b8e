"""Storage contract shared by the session and database backends."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ..models import Todo, TodoList


@runtime_checkable
class TodoRepository(Protocol):
    """Repository interface for lists and their todos.

    Operations that reference a missing list or todo are no-ops (or return
    ``None``); they never raise. Callers check existence with ``find_list``.
    Names are expected to be validated before they reach a repository.
    """

    async def list_all(self) -> List[TodoList]:
        ...

    async def find_list(self, list_id: int) -> Optional[TodoList]:
        ...

    async def create_list(self, name: str) -> TodoList:
        ...

    async def rename_list(self, list_id: int, new_name: str) -> None:
        ...

    async def delete_list(self, list_id: int) -> None:
        ...

    async def add_todo(self, list_id: int, name: str) -> Optional[Todo]:
        ...

    async def delete_todo(self, list_id: int, todo_id: int) -> None:
        ...

    async def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> None:
        ...

    async def complete_all(self, list_id: int) -> None:
        ...
