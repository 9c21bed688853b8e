"""Todo list service - business logic layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models import Todo, TodoList
from ..repositories import TodoRepository
from .validation import NameValidationError, validate_list_name, validate_todo_name

logger = logging.getLogger(__name__)


class TodoListService:
    """Service for list and todo business logic.

    Methods return ``None`` (or ``False``) when the referenced list or todo
    does not exist, and raise :class:`NameValidationError` for bad names.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    async def get_lists(self) -> List[TodoList]:
        """Get all lists."""
        return await self.repository.list_all()

    async def get_list(self, list_id: int) -> Optional[TodoList]:
        """Get a specific list with its todos."""
        return await self.repository.find_list(list_id)

    async def create_list(self, name: str) -> TodoList:
        """Create a new list after validating its name."""
        name = name.strip()
        errors = validate_list_name(name, await self.repository.list_all())
        if errors:
            raise NameValidationError(errors)
        todo_list = await self.repository.create_list(name)
        logger.info("Created list %s", todo_list.id)
        return todo_list

    async def rename_list(self, list_id: int, name: str) -> Optional[TodoList]:
        """Rename an existing list.

        The list being renamed is left out of the uniqueness check so a
        change of case alone is accepted.
        """
        todo_list = await self.repository.find_list(list_id)
        if todo_list is None:
            return None
        name = name.strip()
        others = [item for item in await self.repository.list_all() if item.id != list_id]
        errors = validate_list_name(name, others)
        if errors:
            raise NameValidationError(errors)
        await self.repository.rename_list(list_id, name)
        return await self.repository.find_list(list_id)

    async def delete_list(self, list_id: int) -> bool:
        """Delete a list and its todos."""
        if await self.repository.find_list(list_id) is None:
            return False
        await self.repository.delete_list(list_id)
        logger.info("Deleted list %s", list_id)
        return True

    async def add_todo(self, list_id: int, name: str) -> Optional[Todo]:
        """Add a todo to a list."""
        if await self.repository.find_list(list_id) is None:
            return None
        name = name.strip()
        errors = validate_todo_name(name)
        if errors:
            raise NameValidationError(errors)
        return await self.repository.add_todo(list_id, name)

    async def delete_todo(self, list_id: int, todo_id: int) -> bool:
        """Delete a todo from a list."""
        todo_list = await self.repository.find_list(list_id)
        if todo_list is None or todo_list.find_todo(todo_id) is None:
            return False
        await self.repository.delete_todo(list_id, todo_id)
        return True

    async def set_todo_completed(
        self, list_id: int, todo_id: int, completed: bool
    ) -> Optional[Todo]:
        """Set the completed flag of a todo."""
        todo_list = await self.repository.find_list(list_id)
        if todo_list is None or todo_list.find_todo(todo_id) is None:
            return None
        await self.repository.set_todo_completed(list_id, todo_id, completed)
        updated = await self.repository.find_list(list_id)
        return updated.find_todo(todo_id) if updated else None

    async def complete_all(self, list_id: int) -> Optional[TodoList]:
        """Mark every todo in a list as completed."""
        if await self.repository.find_list(list_id) is None:
            return None
        await self.repository.complete_all(list_id)
        return await self.repository.find_list(list_id)
