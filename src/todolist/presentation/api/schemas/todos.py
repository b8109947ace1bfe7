"""Schemas for todos."""

from datetime import datetime

from pydantic import Field

from todolist.presentation.api.schemas.common import MAX_ID, CamelModel


class TodoCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    list_id: int = Field(
        ..., ge=1, le=MAX_ID, description="List that will contain the todo"
    )
    completed: bool = False


class TodoListQuery(CamelModel):
    """Body form of the listId filter."""

    list_id: int = Field(..., ge=1, le=MAX_ID, description="Owning list")


class TodoUpdateRequest(CamelModel):
    """Partial update; omitted fields keep their current value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    completed: bool | None = None
    list_id: int | None = Field(
        default=None, ge=1, le=MAX_ID, description="Move to another list"
    )

    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (self.name, self.completed, self.list_id)
        )


class TodoResponse(CamelModel):
    id: int
    name: str
    list_id: int
    completed: bool
    created_at: datetime
    updated_at: datetime | None = None
