"""Authentication router for user registration and login."""

import logging

from fastapi import APIRouter

from todolist.presentation.api.dependencies import AuthService, DBSession
from todolist.presentation.api.routers._transaction import handled
from todolist.presentation.api.schemas import (
    ApiResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    summary="Register a new user",
    responses={
        200: {"description": "User registered, token issued"},
        400: {"model": ErrorResponse, "description": "Password not acceptable"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: {"model": ErrorResponse, "description": "Invalid request body"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> ApiResponse[TokenResponse]:
    """
    Create an account and return a bearer token for it.

    The email must not be registered yet; the password is stored as a
    salted bcrypt digest.
    """
    async with handled(session, "Error registering user"):
        _, access_token = await auth_service.register(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        await session.commit()

    return ApiResponse(
        data=TokenResponse(
            token=access_token.token,
            expires_at=access_token.expires_at,
        ),
        message="User registered successfully",
    )


@router.post(
    "/login",
    summary="Login with email and password",
    responses={
        200: {"description": "Login successful, token issued"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        422: {"model": ErrorResponse, "description": "Invalid request body"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> ApiResponse[TokenResponse]:
    """
    Exchange credentials for a bearer token.

    Unknown emails and wrong passwords are reported identically. A
    digest hashed with an outdated cost factor is replaced on success.
    """
    async with handled(session, "Error logging in user"):
        _, access_token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()

    return ApiResponse(
        data=TokenResponse(
            token=access_token.token,
            expires_at=access_token.expires_at,
        ),
        message="User logged in successfully",
    )
