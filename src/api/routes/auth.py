"""Authentication routes (register, login, profile)."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_password_hasher, get_token_service, get_user_repo
from api.models import (
    ErrorResponse,
    LoginResponse,
    ProfileResponse,
    RegisterResponse,
    UserProfile,
    UserSummary,
)
from api.security import require_identity
from domain.model.user import IdentityClaims
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register(
    payload: Optional[dict[str, Any]] = Body(default=None),
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Create an account from ``{name, email, password}``."""
    # bcrypt and pymongo block, keep them off the event loop
    user = await run_in_threadpool(auth_service.register, repo, hasher, payload)
    return RegisterResponse(
        message="User registered successfully",
        user=UserSummary(id=user.id, name=user.name, email=user.email),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}},
)
async def login(
    payload: Optional[dict[str, Any]] = Body(default=None),
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """Exchange ``{email, password}`` for a bearer token valid for one hour."""
    token = await run_in_threadpool(auth_service.login, repo, hasher, tokens, payload)
    return LoginResponse(message="Login successful", token=token)


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def profile(
    identity: IdentityClaims = Depends(require_identity),
    repo: UserRepository = Depends(get_user_repo),
):
    user = await run_in_threadpool(auth_service.get_profile, repo, identity)
    return ProfileResponse(
        message="Welcome to your profile",
        user=UserProfile(id=user.id, name=user.name, email=user.email, created_at=user.created_at),
    )
