"""Centralized exception handlers for the FastAPI application.

Domain and authentication exceptions are mapped to HTTP responses with a
consistent envelope.

Error Response Format:
    {
        "success": false,
        "message": "Human-readable error message",
        "error": {"code": "MACHINE_READABLE_ERROR_CODE", "detail": ...}
    }

Usage:
    from todolist.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todolist.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)
from todolist_auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordHashingError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.LIST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TODO_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ROUTE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Authentication errors come from todolist_auth, which knows nothing of
# the domain error codes.
AUTH_ERROR_MAPPING: list[tuple[type[AuthError], int, ErrorCode]] = [
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED, ErrorCode.INVALID_CREDENTIALS),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED, ErrorCode.INVALID_TOKEN),
    (WeakPasswordError, status.HTTP_400_BAD_REQUEST, ErrorCode.WEAK_PASSWORD),
    (PasswordHashingError, status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_ERROR),
]


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, UnauthorizedError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_400_BAD_REQUEST


def _is_debug(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings is not None and settings.api_debug)


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    detail: Any = None,
) -> JSONResponse:
    """Create a standardized error response."""
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "error": {"code": code, "detail": jsonable_encoder(detail)},
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Details are always logged but only returned to the client in debug
        mode.
        """
        status_code = _get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Internal error on %s %s: %s (details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.details,
            )
        else:
            logger.warning(
                "Domain exception on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            detail=(exc.details or None) if _is_debug(request) else None,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle authentication errors raised outside the gate."""
        for exc_type, status_code, code in AUTH_ERROR_MAPPING:
            if isinstance(exc, exc_type):
                break
        else:
            status_code, code = status.HTTP_401_UNAUTHORIZED, ErrorCode.UNAUTHORIZED

        logger.warning(
            "Authentication error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )

        message = exc.message
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR and not _is_debug(
            request,
        ):
            message = "An internal error occurred"

        return _create_error_response(
            status_code=status_code,
            message=message,
            code=code.value,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed bodies, missing fields and bad path/query parameters."""
        logger.info(
            "Request validation failed on %s %s",
            request.method,
            request.url.path,
        )
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in exc.errors()
        ]
        return _create_error_response(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            message="Invalid request",
            code=ErrorCode.VALIDATION_ERROR.value,
            detail=errors,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Unknown routes and disallowed methods."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            code = ErrorCode.ROUTE_NOT_FOUND
            message = "Route not found"
        elif exc.status_code == status.HTTP_401_UNAUTHORIZED:
            code = ErrorCode.UNAUTHORIZED
            message = str(exc.detail)
        else:
            code = ErrorCode.VALIDATION_ERROR
            message = str(exc.detail)

        return _create_error_response(
            status_code=exc.status_code,
            message=message,
            code=code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for exceptions not handled above.

        The original error is logged; the client only sees it in debug mode.
        """
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
            detail=str(exc) if _is_debug(request) else None,
        )
