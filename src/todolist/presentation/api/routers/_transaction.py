"""Error translation shared by the routers."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from todolist.domain.shared import DomainException, InternalError
from todolist_auth import AuthError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def handled(session: AsyncSession, failure_message: str) -> AsyncIterator[None]:
    """
    Roll back on any failure and hide storage errors behind InternalError.

    Domain and authentication errors propagate unchanged so the exception
    handlers can map them. Anything else is logged with its traceback and
    reported to the client as ``failure_message``.

    Examples
    --------
    >>> async with handled(session, "Error creating list"):
    ...     created = await repo.create(name)
    ...     await session.commit()
    """
    try:
        yield
    except (DomainException, AuthError):
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        logger.exception("%s: %s", failure_message, type(e).__name__)
        raise InternalError(
            failure_message,
            details={"error_type": type(e).__name__},
        ) from e
