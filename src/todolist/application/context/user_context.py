"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todolist.domain.user import User
    from todolist_auth import TokenPayload


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    This is created once per request by the authorization gate and passed
    to repositories. Repositories use the user_id to filter all queries
    to the current user's data.
    """

    user_id: int
    email: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        if user.id is None:
            msg = "Cannot build a context for an unsaved user"
            raise ValueError(msg)
        return cls(user_id=user.id, email=user.email)

    @classmethod
    def from_token(cls, payload: TokenPayload) -> UserContext:
        return cls(user_id=payload.user_id, email=payload.email)

    def __str__(self) -> str:
        return f"UserContext({self.email})"
