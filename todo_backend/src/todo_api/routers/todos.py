from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status

from ..schemas import (
    BulkDeleteEnvelope,
    ErrorEnvelope,
    TodoCreate,
    TodoEnvelope,
    TodoListEnvelope,
    TodoMessageEnvelope,
    TodoOut,
    TodoUpdate,
)
from ..store import ListQuery, TodoStore

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)

_NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "Todo not found"}}
_INVALID = {400: {"model": ErrorEnvelope, "description": "Validation failed"}}


# PUBLIC_INTERFACE
def get_store(request: Request) -> TodoStore:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TodoListEnvelope,
    summary="List Todos",
    description=(
        "List todos in insertion order with optional filters.\n\n"
        "Query parameters:\n"
        "- completed: 'true' selects completed todos, any other value pending ones\n"
        "- search: case-insensitive substring of title or description\n\n"
        "Both filters must match when both are given."
    ),
)
def list_todos(
    completed: Optional[str] = Query(None, description="Filter by completion status"),
    search: Optional[str] = Query(None, description="Search text for title/description"),
    store: TodoStore = Depends(get_store),
) -> TodoListEnvelope:
    """
    List todos with filters.
    """
    query = ListQuery(
        completed=None if completed is None else completed == "true",
        search=search or None,
    )
    items = store.list(query)
    return TodoListEnvelope(data=[TodoOut(**it) for it in items], count=len(items))


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoEnvelope,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses=_NOT_FOUND,
)
def get_todo(todo_id: int, store: TodoStore = Depends(get_store)) -> TodoEnvelope:
    return TodoEnvelope(data=TodoOut(**store.get(todo_id)))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new pending Todo item and return the created resource.",
    responses=_INVALID,
)
def create_todo(
    payload: Optional[TodoCreate] = Body(None),
    store: TodoStore = Depends(get_store),
) -> TodoMessageEnvelope:
    # A missing or null body is an empty todo and fails on the title
    created = store.create(payload if payload is not None else TodoCreate())
    return TodoMessageEnvelope(data=TodoOut(**created), message="Todo created successfully")


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoMessageEnvelope,
    summary="Update Todo",
    description=(
        "Update an existing Todo item. Omitted fields keep their current value; "
        "the merged item is validated as a whole."
    ),
    responses={**_INVALID, **_NOT_FOUND},
)
def update_todo(
    todo_id: int,
    payload: Optional[TodoUpdate] = Body(None),
    store: TodoStore = Depends(get_store),
) -> TodoMessageEnvelope:
    updated = store.update(todo_id, payload if payload is not None else TodoUpdate())
    return TodoMessageEnvelope(data=TodoOut(**updated), message="Todo updated successfully")


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}/toggle",
    response_model=TodoMessageEnvelope,
    summary="Toggle Todo",
    description="Flip the completion status of a Todo item.",
    responses=_NOT_FOUND,
)
def toggle_todo(todo_id: int, store: TodoStore = Depends(get_store)) -> TodoMessageEnvelope:
    toggled = store.toggle(todo_id)
    state = "completed" if toggled["completed"] else "pending"
    return TodoMessageEnvelope(data=TodoOut(**toggled), message=f"Todo marked as {state}")


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=TodoMessageEnvelope,
    summary="Delete Todo",
    description="Delete a Todo item by ID and return the removed item.",
    responses=_NOT_FOUND,
)
def delete_todo(todo_id: int, store: TodoStore = Depends(get_store)) -> TodoMessageEnvelope:
    removed = store.delete(todo_id)
    return TodoMessageEnvelope(data=TodoOut(**removed), message="Todo deleted successfully")


# PUBLIC_INTERFACE
@router.delete(
    "",
    response_model=BulkDeleteEnvelope,
    summary="Delete Completed Todos",
    description="Delete every completed Todo item and report how many were removed.",
)
def delete_completed_todos(store: TodoStore = Depends(get_store)) -> BulkDeleteEnvelope:
    deleted = store.delete_completed()
    return BulkDeleteEnvelope(message=f"Deleted {deleted} completed todos", deleted_count=deleted)
