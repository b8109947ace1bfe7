"""Common schemas shared across API endpoints.

Every endpoint answers with the same envelope:

    success: {"success": true, "data": ..., "message": "..."}
    failure: {"success": false, "message": "...", "error": {"code": ..., "detail": ...}}
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")

# Ids are stored in 32-bit integer columns
MAX_ID = 2**31 - 1


class CamelModel(BaseModel):
    """Base schema using camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard success envelope."""

    success: bool = Field(default=True, description="Always true on success")
    data: DataT | None = Field(default=None, description="Response payload")
    message: str = Field(
        default="Request completed successfully",
        description="Human-readable summary",
    )


class ErrorDetail(BaseModel):
    """Machine-readable part of an error response."""

    code: str = Field(..., description="Error code for programmatic handling")
    detail: Any = Field(
        default=None,
        description="Extra information; only populated in debug mode for "
        "internal errors",
    )


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    success: bool = Field(default=False)
    message: str = Field(..., description="Error message")
    error: ErrorDetail

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "List not found",
                "error": {"code": "LIST_NOT_FOUND", "detail": None},
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
