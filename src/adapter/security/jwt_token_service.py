"""JWT implementation of TokenService (python-jose)."""

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt

from domain.model.errors import InvalidTokenError
from domain.model.user import IdentityClaims

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=1)


class JwtTokenService:
    def __init__(self, secret_key: str, algorithm: str = JWT_ALGORITHM, ttl: timedelta = TOKEN_TTL):
        if not secret_key:
            raise ValueError("A non-empty signing key is required")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, identity: IdentityClaims) -> str:
        """Create a signed token for the identity, valid for ``ttl`` from now."""
        now = datetime.now(timezone.utc)
        payload = {
            "id": identity.id,
            "name": identity.name,
            "email": identity.email,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> IdentityClaims:
        """Check signature and expiry, then rebuild the identity from the payload."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_iat": True},
            )
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError()

        fields = [payload.get(key) for key in ("id", "name", "email")]
        if not all(isinstance(value, str) and value for value in fields):
            logger.debug("JWT payload is missing identity claims")
            raise InvalidTokenError()

        user_id, name, email = fields
        return IdentityClaims(
            id=user_id,
            name=name,
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], timezone.utc),
        )
