"""Schemas for todo lists."""

from datetime import datetime

from pydantic import Field

from todolist.presentation.api.schemas.common import CamelModel


class ListCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class ListUpdateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class ListResponse(CamelModel):
    """A list as returned to its owner."""

    id: int
    name: str
    user_id: int
    created_at: datetime
    updated_at: datetime | None = None


class ListUpdatedResponse(CamelModel):
    id: int
    name: str
