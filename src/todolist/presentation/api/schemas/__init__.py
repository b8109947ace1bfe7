"""Pydantic schemas for the HTTP API."""

from todolist.presentation.api.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from todolist.presentation.api.schemas.common import (
    ApiResponse,
    CamelModel,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    MAX_ID,
)
from todolist.presentation.api.schemas.lists import (
    ListCreateRequest,
    ListResponse,
    ListUpdatedResponse,
    ListUpdateRequest,
)
from todolist.presentation.api.schemas.todos import (
    TodoCreateRequest,
    TodoListQuery,
    TodoResponse,
    TodoUpdateRequest,
)

__all__ = [
    "ApiResponse",
    "CamelModel",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "MAX_ID",
    "ListCreateRequest",
    "ListResponse",
    "ListUpdatedResponse",
    "ListUpdateRequest",
    "LoginRequest",
    "RegisterRequest",
    "TodoCreateRequest",
    "TodoListQuery",
    "TodoResponse",
    "TodoUpdateRequest",
    "TokenResponse",
]
