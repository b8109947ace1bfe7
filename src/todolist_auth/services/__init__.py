"""Authentication services (pure logic, no persistence)."""

from todolist_auth.services.jwt_service import JWTService
from todolist_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
