"""Todo list router.

Every operation is scoped to the authenticated user; lists owned by
someone else behave exactly like lists that do not exist.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path

from todolist.domain.lists import ListNotFoundError
from todolist.presentation.api.dependencies import DBSession, RepoFactory
from todolist.presentation.api.routers._transaction import handled
from todolist.presentation.api.schemas import (
    MAX_ID,
    ApiResponse,
    ErrorResponse,
    ListCreateRequest,
    ListResponse,
    ListUpdatedResponse,
    ListUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ListId = Annotated[int, Path(ge=1, le=MAX_ID, description="List id")]

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "List not found"}}


@router.get("", summary="List the caller's todo lists")
async def get_lists(
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[list[ListResponse]]:
    async with handled(session, "Error fetching lists"):
        lists = await factory.list_repository().find_all()

    return ApiResponse(
        data=[ListResponse.model_validate(item) for item in lists],
        message="Lists fetched successfully",
    )


@router.get("/{list_id}", summary="Get one todo list", responses=_NOT_FOUND)
async def get_list(
    list_id: ListId,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[ListResponse]:
    async with handled(session, "Error fetching list"):
        todo_list = await factory.list_repository().find_by_id(list_id)

    if todo_list is None:
        raise ListNotFoundError(list_id)

    return ApiResponse(
        data=ListResponse.model_validate(todo_list),
        message="List fetched successfully",
    )


@router.post("", summary="Create a todo list")
async def create_list(
    request: ListCreateRequest,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[ListResponse]:
    async with handled(session, "Error creating list"):
        created = await factory.list_repository().create(request.name)
        await session.commit()

    return ApiResponse(
        data=ListResponse.model_validate(created),
        message="List created successfully",
    )


@router.put("/{list_id}", summary="Rename a todo list", responses=_NOT_FOUND)
@router.patch("/{list_id}", summary="Rename a todo list", responses=_NOT_FOUND)
async def update_list(
    list_id: ListId,
    request: ListUpdateRequest,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[ListUpdatedResponse]:
    async with handled(session, "Error updating list"):
        affected = await factory.list_repository().update(list_id, request.name)
        if affected == 0:
            raise ListNotFoundError(list_id, "List not found or update failed")
        await session.commit()

    return ApiResponse(
        data=ListUpdatedResponse(id=list_id, name=request.name),
        message="List updated successfully",
    )


@router.delete("/{list_id}", summary="Delete a todo list", responses=_NOT_FOUND)
async def delete_list(
    list_id: ListId,
    factory: RepoFactory,
    session: DBSession,
) -> ApiResponse[None]:
    """Delete a list together with all of its todos."""
    async with handled(session, "Error deleting list"):
        affected = await factory.list_repository().remove(list_id)
        if affected == 0:
            raise ListNotFoundError(list_id, "List not found or deletion failed")
        await session.commit()

    return ApiResponse(data=None, message="List deleted successfully")
