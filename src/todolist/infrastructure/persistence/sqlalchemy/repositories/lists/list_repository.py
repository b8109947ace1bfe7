"""SQLAlchemy implementation of ListRepository.

This implementation is user-scoped via UserContext, meaning all queries
and mutations filter by the current user's user_id.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.domain.lists import ListRepository, TodoList
from todolist.domain.shared.time import ensure_tz_aware, utc_now
from todolist.infrastructure.persistence.sqlalchemy.models import ListModel, TodoModel

if TYPE_CHECKING:
    from todolist.application.context import UserContext

logger = logging.getLogger(__name__)


class ListRepositorySQLAlchemy(ListRepository):
    """SQLAlchemy implementation of ListRepository."""

    def __init__(self, session: AsyncSession, current_user: UserContext):
        self._session = session
        self._user_id = current_user.user_id

    async def create(self, name: str) -> TodoList:
        model = ListModel(name=name, user_id=self._user_id)
        self._session.add(model)
        await self._session.flush()

        logger.info("Created list %s for user %s", model.id, self._user_id)
        return self._model_to_domain(model)

    async def update(self, list_id: int, name: str) -> int:
        stmt = (
            update(ListModel)
            .where(
                ListModel.id == list_id,
                ListModel.user_id == self._user_id,
            )
            .values(name=name, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def remove(self, list_id: int) -> int:
        owned = select(ListModel.id).where(
            ListModel.id == list_id,
            ListModel.user_id == self._user_id,
        )
        # Not every backend enforces ON DELETE CASCADE (SQLite without PRAGMA)
        await self._session.execute(
            delete(TodoModel)
            .where(TodoModel.list_id.in_(owned))
            .execution_options(synchronize_session=False),
        )

        stmt = (
            delete(ListModel)
            .where(
                ListModel.id == list_id,
                ListModel.user_id == self._user_id,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        if result.rowcount:
            logger.info("Deleted list %s for user %s", list_id, self._user_id)
        return result.rowcount

    async def find_by_id(self, list_id: int) -> Optional[TodoList]:
        stmt = (
            select(ListModel)
            .where(
                ListModel.id == list_id,
                ListModel.user_id == self._user_id,
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return None

        return self._model_to_domain(model)

    async def find_all(self) -> List[TodoList]:
        stmt = (
            select(ListModel)
            .where(ListModel.user_id == self._user_id)
            .order_by(ListModel.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._model_to_domain(model) for model in models]

    def _model_to_domain(self, model: ListModel) -> TodoList:
        return TodoList(
            id=model.id,
            name=model.name,
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at) if model.updated_at else None,
        )
