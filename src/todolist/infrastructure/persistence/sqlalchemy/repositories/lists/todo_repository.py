"""SQLAlchemy implementation of TodoRepository.

With ownership enforcement on (the default), every statement is joined
through the owning list so that a todo in another user's list looks
exactly like a missing todo. With enforcement off the repository filters
by todo id / list id only, which lets any authenticated user reach any
todo whose id they know.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.domain.lists import ListNotFoundError, Todo, TodoRepository
from todolist.domain.shared.time import ensure_tz_aware, utc_now
from todolist.infrastructure.persistence.sqlalchemy.models import ListModel, TodoModel

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from todolist.application.context import UserContext

logger = logging.getLogger(__name__)


class TodoRepositorySQLAlchemy(TodoRepository):
    """SQLAlchemy implementation of TodoRepository."""

    def __init__(
        self,
        session: AsyncSession,
        current_user: UserContext,
        enforce_ownership: bool = True,
    ):
        self._session = session
        self._user_id = current_user.user_id
        self._enforce_ownership = enforce_ownership

    @property
    def enforces_ownership(self) -> bool:
        return self._enforce_ownership

    async def create(self, name: str, list_id: int, completed: bool = False) -> Todo:
        await self._ensure_list_is_owned(list_id)

        model = TodoModel(name=name, list_id=list_id, completed=completed)
        self._session.add(model)
        await self._session.flush()

        logger.info("Created todo %s in list %s", model.id, list_id)
        return self._model_to_domain(model)

    async def update(
        self,
        todo_id: int,
        *,
        name: str | None = None,
        completed: bool | None = None,
        list_id: int | None = None,
    ) -> int:
        values: dict[str, Any] = {}
        if name is not None:
            values["name"] = name
        if completed is not None:
            values["completed"] = completed
        if list_id is not None:
            await self._ensure_list_is_owned(list_id)
            values["list_id"] = list_id

        if not values:
            return 0

        values["updated_at"] = utc_now()
        stmt = (
            update(TodoModel)
            .where(TodoModel.id == todo_id, *self._ownership_filter())
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def remove(self, todo_id: int) -> int:
        stmt = (
            delete(TodoModel)
            .where(TodoModel.id == todo_id, *self._ownership_filter())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        if result.rowcount:
            logger.info("Deleted todo %s", todo_id)
        return result.rowcount

    async def find_by_id(self, todo_id: int) -> Optional[Todo]:
        stmt = (
            select(TodoModel)
            .where(TodoModel.id == todo_id, *self._ownership_filter())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return None

        return self._model_to_domain(model)

    async def find_all_by_list_id(self, list_id: int) -> List[Todo]:
        stmt = (
            select(TodoModel)
            .where(TodoModel.list_id == list_id, *self._ownership_filter())
            .order_by(TodoModel.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._model_to_domain(model) for model in models]

    def _ownership_filter(self) -> list[ColumnElement[bool]]:
        if not self._enforce_ownership:
            return []
        owned_lists = select(ListModel.id).where(ListModel.user_id == self._user_id)
        return [TodoModel.list_id.in_(owned_lists)]

    async def _ensure_list_is_owned(self, list_id: int) -> None:
        if not self._enforce_ownership:
            return
        stmt = select(ListModel.id).where(
            ListModel.id == list_id,
            ListModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise ListNotFoundError(list_id)

    def _model_to_domain(self, model: TodoModel) -> Todo:
        return Todo(
            id=model.id,
            name=model.name,
            list_id=model.list_id,
            completed=model.completed,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at) if model.updated_at else None,
        )
