"""API routes for todo list management."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..presentation import sort_lists
from ..services import NameValidationError, TodoListService
from .dependencies import bind_list_id, get_todo_list_service
from .models import (
    ListDetailResponse,
    ListMutationResponse,
    ListNameRequest,
    ListSummaryResponse,
    MessageResponse,
    TodoCreateRequest,
    TodoMutationResponse,
    TodoResponse,
    TodoStatusRequest,
)

LIST_NOT_FOUND = "The specified list was not found."
TODO_NOT_FOUND = "The specified todo was not found."

router = APIRouter()


def _invalid_name(exc: NameValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"errors": exc.errors})


@router.get("/lists", response_model=List[ListSummaryResponse])
async def get_lists(
    service: TodoListService = Depends(get_todo_list_service),
) -> List[ListSummaryResponse]:
    """Get all lists, incomplete ones first."""
    lists = await service.get_lists()
    return [ListSummaryResponse.from_list(todo_list) for todo_list in sort_lists(lists)]


@router.post("/lists", response_model=ListMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_list(
    payload: ListNameRequest,
    service: TodoListService = Depends(get_todo_list_service),
) -> ListMutationResponse:
    """Create a new list."""
    try:
        todo_list = await service.create_list(payload.list_name)
    except NameValidationError as exc:
        raise _invalid_name(exc) from exc
    return ListMutationResponse(
        message="The list has been created.",
        list=ListDetailResponse.from_list(todo_list),
    )


@router.get("/lists/{list_id}", response_model=ListDetailResponse)
async def get_list(
    list_id: int = Depends(bind_list_id),
    service: TodoListService = Depends(get_todo_list_service),
) -> ListDetailResponse:
    """Get a list with its todos."""
    todo_list = await service.get_list(list_id)
    if todo_list is None:
        raise HTTPException(status_code=404, detail=LIST_NOT_FOUND)
    return ListDetailResponse.from_list(todo_list)


@router.put("/lists/{list_id}", response_model=ListMutationResponse)
async def rename_list(
    payload: ListNameRequest,
    list_id: int = Depends(bind_list_id),
    service: TodoListService = Depends(get_todo_list_service),
) -> ListMutationResponse:
    """Rename a list."""
    try:
        todo_list = await service.rename_list(list_id, payload.list_name)
    except NameValidationError as exc:
        raise _invalid_name(exc) from exc
    if todo_list is None:
        raise HTTPException(status_code=404, detail=LIST_NOT_FOUND)
    return ListMutationResponse(
        message="The list name has been updated.",
        list=ListDetailResponse.from_list(todo_list),
    )


@router.delete("/lists/{list_id}", response_model=MessageResponse)
async def delete_list(
    list_id: int = Depends(bind_list_id),
    service: TodoListService = Depends(get_todo_list_service),
) -> MessageResponse:
    """Delete a list and all of its todos."""
    if not await service.delete_list(list_id):
        raise HTTPException(status_code=404, detail=LIST_NOT_FOUND)
    return MessageResponse(message="The list has been deleted.")


@router.post(
    "/lists/{list_id}/todos",
    response_model=TodoMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_todo(
    payload: TodoCreateRequest,
    list_id: int = Depends(bind_list_id),
    service: TodoListService = Depends(get_todo_list_service),
) -> TodoMutationResponse:
    """Add a todo to a list."""
    try:
        todo = await service.add_todo(list_id, payload.todo)
    except NameValidationError as exc:
        raise _invalid_name(exc) from exc
    if todo is None:
        raise HTTPException(status_code=404, detail=LIST_NOT_FOUND)
    return TodoMutationResponse(message="The todo was added.", todo=TodoResponse.from_todo(todo))


@router.put("/lists/{list_id}/todos/{todo_id}", response_model=TodoMutationResponse)
async def update_todo(
    todo_id: int,
    payload: TodoStatusRequest,
    list_id: int = Depends(bind_list_id),
    service: TodoListService = Depends(get_todo_list_service),
) -> TodoMutationResponse:
    """Set the completed flag of a todo."""
    todo = await service.set_todo_completed(list_id, todo_id, payload.completed)
    if todo is None:
        raise HTTPException(status_code=404, detail=_missing_detail(await service.get_list(list_id)))
    return TodoMutationResponse(
        message="The todo has been updated.",
        todo=TodoResponse.from_todo(todo),
    )


@router.delete("/lists/{list_id}/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: int,
    list_id: int = Depends(bind_list_id),
    service: TodoListService = Depends(get_todo_list_service),
) -> None:
    """Delete a todo from a list."""
    if not await service.delete_todo(list_id, todo_id):
        raise HTTPException(status_code=404, detail=_missing_detail(await service.get_list(list_id)))


@router.post("/lists/{list_id}/complete_all", response_model=ListMutationResponse)
async def complete_all(
    list_id: int = Depends(bind_list_id),
    service: TodoListService = Depends(get_todo_list_service),
) -> ListMutationResponse:
    """Mark every todo in a list as completed."""
    todo_list = await service.complete_all(list_id)
    if todo_list is None:
        raise HTTPException(status_code=404, detail=LIST_NOT_FOUND)
    return ListMutationResponse(
        message=f'All todos for list "{todo_list.name}" were marked complete.',
        list=ListDetailResponse.from_list(todo_list),
    )


def _missing_detail(todo_list) -> str:
    return LIST_NOT_FOUND if todo_list is None else TODO_NOT_FOUND
