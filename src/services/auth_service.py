"""Auth service — registration, login, bearer authentication and profile lookup.

Pure business logic with no HTTP dependencies.
Raises domain errors that the API layer maps to HTTP status codes.
"""

import logging
from typing import Any

from domain.model.errors import (
    AuthorizationMissingError,
    InvalidCredentialsError,
    DuplicateResourceError,
    NotFoundError,
    ValidationError,
)
from domain.model.user import IdentityClaims, User
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository
from services.validation import LOGIN_RULES, REGISTER_RULES, validate

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def _check(body: Any, rules) -> dict:
    errors = validate(body, rules)
    if errors:
        raise ValidationError(errors)
    return body


def register(repo: UserRepository, hasher: PasswordHasher, body: Any) -> User:
    """Register a new user from an untrusted request body.

    Raises:
        ValidationError: one or more field rules failed
        DuplicateResourceError: email already registered (also when a concurrent
            insert wins the race and the repository rejects ours)
    """
    body = _check(body, REGISTER_RULES)
    name, email, password = body["name"], body["email"], body["password"]

    if repo.get_by_email(email):
        logger.info("Registration rejected: email already registered", extra={"email": email})
        raise DuplicateResourceError()

    user = repo.create(name=name, email=email, password_hash=hasher.hash(password))
    logger.info("User registered", extra={"userId": user.id, "email": email})
    return user


def login(repo: UserRepository, hasher: PasswordHasher, tokens: TokenService, body: Any) -> str:
    """Verify credentials and return a signed access token.

    Raises:
        ValidationError: email malformed or password missing
        InvalidCredentialsError: unknown email or wrong password (same message)
    """
    body = _check(body, LOGIN_RULES)
    email, password = body["email"], body["password"]

    user = repo.get_by_email(email)
    if not user:
        logger.info("Login failed", extra={"email": email, "reason": "unknown_email"})
        raise InvalidCredentialsError()

    if not user.password_hash or not hasher.verify(password, user.password_hash):
        logger.info("Login failed", extra={"userId": user.id, "reason": "wrong_password"})
        raise InvalidCredentialsError()

    token = tokens.issue(IdentityClaims(id=user.id, name=user.name, email=user.email))
    logger.info("User logged in", extra={"userId": user.id})
    return token


def authenticate_bearer(authorization: str | None, tokens: TokenService) -> IdentityClaims:
    """Guard stage for protected operations: Authorization header in, identity out.

    Raises:
        AuthorizationMissingError: header absent or no token after the prefix
        InvalidTokenError: bad signature, malformed or expired token
    """
    token = (authorization or "").removeprefix(BEARER_PREFIX).strip()
    if not token:
        raise AuthorizationMissingError()
    return tokens.verify(token)


def get_profile(repo: UserRepository, identity: IdentityClaims) -> User:
    """Load the authenticated user's profile (no password hash).

    Raises:
        NotFoundError: the user no longer exists
    """
    user = repo.get_by_id(identity.id)
    if not user:
        raise NotFoundError()
    return user
