"""Tests for the session-backed repository."""

import pytest

from todolists.models import Todo, TodoList
from todolists.repositories import SessionRepository, TodoRepository, next_element_id


def test_session_repository_satisfies_contract(repository):
    assert isinstance(repository, TodoRepository)


def test_next_element_id():
    assert next_element_id([]) == 1
    assert next_element_id([Todo(id=3, name="a"), Todo(id=7, name="b")]) == 8


class TestSessionRepository:
    """Test suite for SessionRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_list(self, repository):
        created = await repository.create_list("Groceries")

        assert created.id == 1
        assert created.todos == []
        found = await repository.find_list(1)
        assert found is not None
        assert found.name == "Groceries"

    @pytest.mark.asyncio
    async def test_list_all_keeps_insertion_order(self, repository):
        await repository.create_list("First")
        await repository.create_list("Second")

        lists = await repository.list_all()

        assert [item.name for item in lists] == ["First", "Second"]
        assert [item.id for item in lists] == [1, 2]

    @pytest.mark.asyncio
    async def test_id_recomputed_from_current_max(self, repository):
        await repository.create_list("Only")
        await repository.delete_list(1)

        recreated = await repository.create_list("Again")

        assert recreated.id == 1

    @pytest.mark.asyncio
    async def test_rename_list(self, repository):
        await repository.create_list("Groceries")
        await repository.rename_list(1, "Shopping")

        assert (await repository.find_list(1)).name == "Shopping"

    @pytest.mark.asyncio
    async def test_delete_list_removes_todos(self, repository, state):
        await repository.create_list("Groceries")
        await repository.add_todo(1, "Milk")

        await repository.delete_list(1)

        assert await repository.find_list(1) is None
        assert state.lists == []

    @pytest.mark.asyncio
    async def test_todo_ids_are_scoped_to_their_list(self, repository):
        await repository.create_list("A")
        await repository.create_list("B")

        first = await repository.add_todo(1, "one")
        second = await repository.add_todo(1, "two")
        other = await repository.add_todo(2, "other")

        assert (first.id, second.id, other.id) == (1, 2, 1)
        assert first.completed is False

    @pytest.mark.asyncio
    async def test_delete_todo(self, repository):
        await repository.create_list("Groceries")
        await repository.add_todo(1, "Milk")
        await repository.add_todo(1, "Eggs")

        await repository.delete_todo(1, 1)

        todo_list = await repository.find_list(1)
        assert [todo.name for todo in todo_list.todos] == ["Eggs"]

    @pytest.mark.asyncio
    async def test_set_todo_completed(self, repository):
        await repository.create_list("Groceries")
        await repository.add_todo(1, "Milk")

        await repository.set_todo_completed(1, 1, True)
        assert (await repository.find_list(1)).todos[0].completed is True

        await repository.set_todo_completed(1, 1, False)
        assert (await repository.find_list(1)).todos[0].completed is False

    @pytest.mark.asyncio
    async def test_complete_all(self, state):
        state.lists.append(
            TodoList(
                id=1,
                name="Groceries",
                todos=[Todo(id=1, name="Milk"), Todo(id=2, name="Eggs", completed=True)],
            )
        )
        repository = SessionRepository(state)

        await repository.complete_all(1)

        todo_list = await repository.find_list(1)
        assert [todo.completed for todo in todo_list.todos] == [True, True]
        assert todo_list.is_complete is True

    @pytest.mark.asyncio
    async def test_complete_all_on_empty_list_is_noop(self, repository):
        await repository.create_list("Empty")
        before = (await repository.find_list(1)).model_dump()

        await repository.complete_all(1)

        assert (await repository.find_list(1)).model_dump() == before

    @pytest.mark.asyncio
    async def test_missing_ids_are_noops(self, repository, state):
        await repository.create_list("Groceries")
        await repository.add_todo(1, "Milk")
        snapshot = [item.model_dump() for item in state.lists]

        assert await repository.find_list(99) is None
        assert await repository.add_todo(99, "Ghost") is None
        await repository.rename_list(99, "Nope")
        await repository.delete_list(99)
        await repository.delete_todo(99, 1)
        await repository.delete_todo(1, 99)
        await repository.set_todo_completed(99, 1, True)
        await repository.set_todo_completed(1, 99, True)
        await repository.complete_all(99)

        assert [item.model_dump() for item in state.lists] == snapshot
