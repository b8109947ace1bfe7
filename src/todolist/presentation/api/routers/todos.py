"""Todo router.

A todo is reachable only through a list owned by the caller (unless
ownership enforcement is switched off in the settings).
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.domain.lists import TodoNotFoundError
from todolist.domain.shared import ValidationError
from todolist.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from todolist.presentation.api.dependencies import DBSession, RepoFactory
from todolist.presentation.api.routers._transaction import handled
from todolist.presentation.api.schemas import (
    MAX_ID,
    ApiResponse,
    ErrorResponse,
    TodoCreateRequest,
    TodoListQuery,
    TodoResponse,
    TodoUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

TodoId = Annotated[int, Path(ge=1, le=MAX_ID, description="Todo id")]

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Todo not found"}}


@router.get("", summary="List the todos of one list")
async def get_todos(
    list_id: Annotated[
        int,
        Query(alias="listId", ge=1, le=MAX_ID, description="Owning list"),
    ],
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[list[TodoResponse]]:
    """Todos of a list, oldest first. A list the caller cannot see is empty."""
    return await _todos_of_list(list_id, factory, session)


@router.post("/list", summary="List the todos of one list (body form)")
async def get_todos_by_body(
    request: TodoListQuery,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[list[TodoResponse]]:
    """Same as ``GET /todos?listId=`` for clients that send the id in a body."""
    return await _todos_of_list(request.list_id, factory, session)


async def _todos_of_list(
    list_id: int,
    factory: SQLAlchemyRepositoryFactory,
    session: AsyncSession,
) -> ApiResponse[list[TodoResponse]]:
    async with handled(session, "Error fetching todos"):
        todos = await factory.todo_repository().find_all_by_list_id(list_id)

    return ApiResponse(
        data=[TodoResponse.model_validate(todo) for todo in todos],
        message="Todos fetched successfully",
    )


@router.get("/{todo_id}", summary="Get one todo", responses=_NOT_FOUND)
async def get_todo(
    todo_id: TodoId,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[TodoResponse]:
    async with handled(session, "Error fetching todo"):
        todo = await factory.todo_repository().find_by_id(todo_id)

    if todo is None:
        raise TodoNotFoundError(todo_id)

    return ApiResponse(
        data=TodoResponse.model_validate(todo),
        message="Todo fetched successfully",
    )


@router.post(
    "",
    summary="Create a todo",
    responses={404: {"model": ErrorResponse, "description": "List not found"}},
)
async def create_todo(
    request: TodoCreateRequest,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[TodoResponse]:
    async with handled(session, "Error creating todo"):
        created = await factory.todo_repository().create(
            name=request.name,
            list_id=request.list_id,
            completed=request.completed,
        )
        await session.commit()

    return ApiResponse(
        data=TodoResponse.model_validate(created),
        message="Todo created successfully",
    )


_UPDATE_RESPONSES = {
    400: {"model": ErrorResponse, "description": "No fields to update"},
    **_NOT_FOUND,
}


@router.put("/{todo_id}", summary="Update a todo", responses=_UPDATE_RESPONSES)
@router.patch("/{todo_id}", summary="Update a todo", responses=_UPDATE_RESPONSES)
async def update_todo(
    todo_id: TodoId,
    request: TodoUpdateRequest,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[TodoResponse]:
    """
    Change any of name, completion flag and list.

    Omitted fields keep their value. Moving a todo requires owning the
    target list.
    """
    if not request.has_changes():
        raise ValidationError("No fields to update")

    repo = factory.todo_repository()
    async with handled(session, "Error updating todo"):
        affected = await repo.update(
            todo_id,
            name=request.name,
            completed=request.completed,
            list_id=request.list_id,
        )
        if affected == 0:
            raise TodoNotFoundError(todo_id, "Todo not found or update failed")
        await session.commit()
        updated = await repo.find_by_id(todo_id)

    if updated is None:
        raise TodoNotFoundError(todo_id)

    return ApiResponse(
        data=TodoResponse.model_validate(updated),
        message="Todo updated successfully",
    )


@router.delete("/{todo_id}", summary="Delete a todo", responses=_NOT_FOUND)
async def delete_todo(
    todo_id: TodoId,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[None]:
    async with handled(session, "Error deleting todo"):
        affected = await factory.todo_repository().remove(todo_id)
        if affected == 0:
            raise TodoNotFoundError(todo_id, "Todo not found or deletion failed")
        await session.commit()

    return ApiResponse(data=None, message="Todo deleted successfully")
