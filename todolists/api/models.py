"""Request and response models for the todo list API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..models import Todo, TodoList
from ..presentation import sort_todos, todo_completion_ratio, todos_remaining_count


class ListNameRequest(BaseModel):
    """Payload for creating or renaming a list."""

    list_name: str


class TodoCreateRequest(BaseModel):
    """Payload for adding a todo to a list."""

    todo: str


class TodoStatusRequest(BaseModel):
    """Payload for toggling a todo."""

    completed: bool


class TodoResponse(BaseModel):
    id: int
    name: str
    completed: bool

    @classmethod
    def from_todo(cls, todo: Todo) -> "TodoResponse":
        return cls(id=todo.id, name=todo.name, completed=todo.completed)


class ListSummaryResponse(BaseModel):
    """List as shown in the overview."""

    id: int
    name: str
    complete: bool
    todos_count: int
    todos_remaining: int
    completion_ratio: str

    @classmethod
    def from_list(cls, todo_list: TodoList) -> "ListSummaryResponse":
        return cls(
            id=todo_list.id,
            name=todo_list.name,
            complete=todo_list.is_complete,
            todos_count=len(todo_list.todos),
            todos_remaining=todos_remaining_count(todo_list.todos),
            completion_ratio=todo_completion_ratio(todo_list.todos),
        )


class ListDetailResponse(ListSummaryResponse):
    """List with its todos, open todos first."""

    todos: List[TodoResponse] = Field(default_factory=list)

    @classmethod
    def from_list(cls, todo_list: TodoList) -> "ListDetailResponse":
        summary = ListSummaryResponse.from_list(todo_list)
        return cls(
            **summary.model_dump(),
            todos=[TodoResponse.from_todo(todo) for todo in sort_todos(todo_list.todos)],
        )


class MessageResponse(BaseModel):
    message: str


class ListMutationResponse(MessageResponse):
    list: ListDetailResponse


class TodoMutationResponse(MessageResponse):
    todo: TodoResponse
