"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from todolist.infrastructure.persistence.sqlalchemy.repositories.lists import (
    ListRepositorySQLAlchemy,
    TodoRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from todolist.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """Creates repositories bound to one session and one user."""

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        enforce_todo_ownership: bool = True,
    ):
        self._session = session
        self._user_context = user_context
        self._enforce_todo_ownership = enforce_todo_ownership

        # Cached instances (created on demand)
        self._list_repo: ListRepositorySQLAlchemy | None = None
        self._todo_repo: TodoRepositorySQLAlchemy | None = None

    def list_repository(self) -> ListRepositorySQLAlchemy:
        if self._list_repo is None:
            self._list_repo = ListRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._list_repo

    def todo_repository(self) -> TodoRepositorySQLAlchemy:
        if self._todo_repo is None:
            self._todo_repo = TodoRepositorySQLAlchemy(
                self._session,
                self._user_context,
                enforce_ownership=self._enforce_todo_ownership,
            )
        return self._todo_repo
