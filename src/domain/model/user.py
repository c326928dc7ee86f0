from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a registered user."""
    id: str
    name: str
    email: str
    created_at: datetime
    password_hash: str | None = None


@dataclass(frozen=True)
class IdentityClaims:
    """Identity carried inside a signed access token.

    Rebuilt on every request from the verified token payload, never persisted.
    """
    id: str
    name: str
    email: str
    issued_at: datetime | None = None
    expires_at: datetime | None = None
