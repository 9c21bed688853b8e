"""Todo list repository backed by PostgreSQL through asyncpg."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import asyncpg

from ..models import Todo, TodoList

logger = logging.getLogger(__name__)

_TRUE_FLAGS = {"t", "true", "1", "y", "yes"}


def flag_to_bool(value: Any) -> bool:
    """Normalize the textual ``completed`` column to a boolean."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_FLAGS


def bool_to_flag(value: bool) -> str:
    """Encode a boolean for the textual ``completed`` column."""
    return "t" if value else "f"


def row_to_todo(row: Mapping[str, Any]) -> Todo:
    return Todo(id=row["id"], name=row["name"], completed=flag_to_bool(row["completed"]))


def row_to_list(row: Mapping[str, Any], todos: Optional[List[Todo]] = None) -> TodoList:
    return TodoList(id=row["id"], name=row["name"], todos=todos or [])


class DatabaseRepository:
    """Repository issuing one parameterized statement per operation."""

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def list_all(self) -> List[TodoList]:
        list_rows = await self._fetch("SELECT id, name FROM lists ORDER BY id;")
        todo_rows = await self._fetch(
            "SELECT id, list_id, name, completed FROM todos ORDER BY list_id, id;"
        )
        todos_by_list: Dict[int, List[Todo]] = {}
        for row in todo_rows:
            todos_by_list.setdefault(row["list_id"], []).append(row_to_todo(row))
        return [row_to_list(row, todos_by_list.get(row["id"])) for row in list_rows]

    async def find_list(self, list_id: int) -> Optional[TodoList]:
        row = await self._fetchrow("SELECT id, name FROM lists WHERE id = $1;", list_id)
        if row is None:
            return None
        return row_to_list(row, await self._fetch_todos(row["id"]))

    async def create_list(self, name: str) -> TodoList:
        row = await self._fetchrow(
            """
            INSERT INTO lists (id, name)
            SELECT COALESCE(MAX(id), 0) + 1, $1::text FROM lists
            RETURNING id, name;
            """,
            name,
        )
        return row_to_list(row)

    async def rename_list(self, list_id: int, new_name: str) -> None:
        await self._execute("UPDATE lists SET name = $2 WHERE id = $1;", list_id, new_name)

    async def delete_list(self, list_id: int) -> None:
        await self._execute("DELETE FROM lists WHERE id = $1;", list_id)

    async def add_todo(self, list_id: int, name: str) -> Optional[Todo]:
        row = await self._fetchrow(
            """
            INSERT INTO todos (id, list_id, name, completed)
            SELECT COALESCE(MAX(todos.id), 0) + 1, lists.id, $2::text, $3::text
            FROM lists
            LEFT JOIN todos ON todos.list_id = lists.id
            WHERE lists.id = $1
            GROUP BY lists.id
            RETURNING id, list_id, name, completed;
            """,
            list_id,
            name,
            bool_to_flag(False),
        )
        if row is None:
            return None
        return row_to_todo(row)

    async def delete_todo(self, list_id: int, todo_id: int) -> None:
        await self._execute("DELETE FROM todos WHERE list_id = $1 AND id = $2;", list_id, todo_id)

    async def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> None:
        await self._execute(
            "UPDATE todos SET completed = $3 WHERE list_id = $1 AND id = $2;",
            list_id,
            todo_id,
            bool_to_flag(completed),
        )

    async def complete_all(self, list_id: int) -> None:
        await self._execute(
            "UPDATE todos SET completed = $2 WHERE list_id = $1;",
            list_id,
            bool_to_flag(True),
        )

    async def _fetch_todos(self, list_id: int) -> List[Todo]:
        rows = await self._fetch(
            "SELECT id, list_id, name, completed FROM todos WHERE list_id = $1 ORDER BY id;",
            list_id,
        )
        return [row_to_todo(row) for row in rows]

    async def _fetch(self, statement: str, *params: Any) -> List[Mapping[str, Any]]:
        self._log_statement(statement, params)
        try:
            return await self._pool.fetch(statement, *params)
        except Exception:
            _log_db_error(statement, params)
            raise

    async def _fetchrow(self, statement: str, *params: Any) -> Optional[Mapping[str, Any]]:
        self._log_statement(statement, params)
        try:
            return await self._pool.fetchrow(statement, *params)
        except Exception:
            _log_db_error(statement, params)
            raise

    async def _execute(self, statement: str, *params: Any) -> None:
        self._log_statement(statement, params)
        try:
            await self._pool.execute(statement, *params)
        except Exception:
            _log_db_error(statement, params)
            raise

    @staticmethod
    def _log_statement(statement: str, params: tuple) -> None:
        logger.info("%s : %s", " ".join(statement.split()), list(params))


def _log_db_error(statement: str, params: tuple) -> None:
    summary = [type(value).__name__ for value in params]
    logger.exception("Database statement failed: %s (types=%s)", " ".join(statement.split()), summary)
