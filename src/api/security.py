"""Bearer-token guard for protected routes."""

from typing import Optional

from fastapi import Depends, Header

from api.dependencies import get_token_service
from domain.model.user import IdentityClaims
from port.token_service import TokenService
from services.auth_service import authenticate_bearer


def require_identity(
    authorization: Optional[str] = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> IdentityClaims:
    """Verified identity of the caller. Short-circuits the request with 401 otherwise."""
    return authenticate_bearer(authorization, tokens)
