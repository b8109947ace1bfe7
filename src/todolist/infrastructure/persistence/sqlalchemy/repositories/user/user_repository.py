"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.domain.shared.time import ensure_tz_aware
from todolist.domain.user import EmailAlreadyExistsError, User, UserRepository
from todolist.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> User | None:
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = (
            select(UserModel)
            .where(UserModel.email == email.strip())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email.strip())
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> User:
        if user.is_persisted:
            msg = f"User {user.id} is already stored; users are immutable"
            raise ValueError(msg)

        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

        user.assign_id(model.id)
        logger.info("Created user: %s (email: %s)", user.id, user.email)
        return user

    async def update_password_hash(self, user_id: int, password_hash: str) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(stmt)
        logger.info("Updated password hash for user %s", user_id)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
