"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from todolist.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates (the credential store)."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by exact email match."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist a new user and assign its generated id.

        Raises
        ------
        EmailAlreadyExistsError
            If the store's uniqueness constraint rejects the email
        """

    @abstractmethod
    async def update_password_hash(self, user_id: int, password_hash: str) -> None:
        """Replace the stored digest of an existing user."""
