"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todolist.domain.user import EmailAlreadyExistsError, User
from todolist_auth import (
    AccessToken,
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)

if TYPE_CHECKING:
    from todolist.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates todolist_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password (upgrading outdated digests)
    - Token verification

    The service is stateless; every call stands alone and nothing is
    retried. Callers own the transaction (commit/rollback).
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_token(self, user: User) -> AccessToken:
        if user.id is None:
            msg = "Cannot issue a token for an unsaved user"
            raise ValueError(msg)
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

    async def register(
        self,
        name: str,
        email: str,
        password: str,
    ) -> tuple[User, AccessToken]:
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(name=name, email=email, password_hash=password_hash)

        # A concurrent registration can still win the race here; the
        # store's unique constraint turns that into EmailAlreadyExistsError.
        user = await self._user_repo.save(user)

        access_token = self._issue_token(user)

        logger.info("User registered: %s (id: %s)", user.email, user.id)
        return user, access_token

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, AccessToken]:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Failed login attempt for user: %s", user.id)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(user.password_hash):
            # Digest predates the configured cost factor
            await self._user_repo.update_password_hash(
                user.id,
                self._password_service.hash(password),
            )

        access_token = self._issue_token(user)

        logger.info("User logged in: %s", email)
        return user, access_token

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
