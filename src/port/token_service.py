from typing import Protocol
from domain.model.user import IdentityClaims


class TokenService(Protocol):
    """Issues and verifies signed, time-limited access tokens."""
    def issue(self, identity: IdentityClaims) -> str:
        ...

    def verify(self, token: str) -> IdentityClaims:
        """Return the embedded identity. Raises InvalidTokenError on any failure."""
        ...
