"""User domain - manages user identity and credentials.

Design notes:
- User ID is a monotonic integer assigned by the store
- Email is unique and matched exactly (case-sensitive)
- The password digest lives on the aggregate but never leaves the server
- Repository interface defined here, implementation in infrastructure
"""

from todolist.domain.user.aggregates import User
from todolist.domain.user.exceptions import EmailAlreadyExistsError
from todolist.domain.user.repositories import UserRepository

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserRepository",
]
