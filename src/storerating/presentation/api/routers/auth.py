"""Authentication router for signup, login, password change and profile."""

import logging

from fastapi import APIRouter, HTTPException, status

from storerating.presentation.api.dependencies import (
    AuthenticatedIdentity,
    AuthService,
    DBSession,
)
from storerating.presentation.api.schemas.auth import (
    LoginRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
    UpdatePasswordRequest,
    UserResponse,
)
from storerating.presentation.api.schemas.common import MessageResponse
from storerating_identity.exceptions import (
    InvalidCredentialsError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register as a Normal User",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input (name length, weak password)"},
        409: {"description": "Email already registered"},
    },
)
async def signup(
    request: SignupRequest,
    auth_service: AuthService,
    session: DBSession,
) -> SignupResponse:
    """
    Create a Normal User account.

    Self-service signup never grants any other role.
    """
    try:
        user = await auth_service.signup(
            name=request.name,
            email=request.email,
            password=request.password,
            address=request.address,
        )
    except WeakPasswordError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e

    await session.commit()
    return SignupResponse(message="User created", user_id=user.id)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    try:
        _, token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e

    # Persist last_login_at
    await session.commit()
    return TokenResponse(token=token)


@router.put(
    "/update-password",
    summary="Change own password",
    responses={
        200: {"description": "Password updated"},
        400: {"description": "New password does not meet the policy"},
        401: {"description": "Not authenticated or invalid current password"},
    },
)
async def update_password(
    request: UpdatePasswordRequest,
    identity: AuthenticatedIdentity,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    try:
        await auth_service.change_password(
            user_id=identity.user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
    except WeakPasswordError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e

    await session.commit()
    return MessageResponse(message="Password updated")


@router.get(
    "/profile",
    summary="Get the caller's profile",
    responses={
        200: {"description": "User profile"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def get_profile(
    identity: AuthenticatedIdentity,
    auth_service: AuthService,
) -> UserResponse:
    user = await auth_service.get_profile(identity.user_id)
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        address=user.address,
        role=user.role,
    )
