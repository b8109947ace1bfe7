"""Authentication schemas for request/response models."""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field

from todolist.presentation.api.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="Plaintext password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Mario",
                "email": "mario@test.it",
                "password": "pw123",
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "mario@test.it",
                "password": "pw123",
            },
        },
    )


class TokenResponse(CamelModel):
    """Bearer token issued by register and login."""

    token: str
    expires_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "expiresAt": "2024-12-05T11:30:00Z",
            },
        },
    )
