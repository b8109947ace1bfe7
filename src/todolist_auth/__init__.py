"""Todolist Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the todo domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    todolist_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from todolist_auth import PasswordHashingService, JWTService
"""

from todolist_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordHashingError,
    WeakPasswordError,
)
from todolist_auth.schemas import AccessToken, TokenPayload
from todolist_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "AccessToken",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
    "PasswordHashingError",
]
