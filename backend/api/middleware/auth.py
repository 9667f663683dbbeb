"""
JWT Authentication middleware.

Verifies bearer tokens issued by the token endpoint.
"""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.config import Settings
from shared.exceptions import AuthenticationError
from modules.auth.interfaces import ITokenService
from modules.auth.models import TokenClaims
from modules.auth.exceptions import MissingTokenError

from ..dependencies import get_app_settings, get_token_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
    tokens: ITokenService = Depends(get_token_service),
) -> Optional[TokenClaims]:
    """
    Dependency that requires a valid bearer token.

    Returns None without looking at the request when authentication is
    disabled in settings.

    Usage:
        @router.get("/protected")
        async def protected_route(claims: TokenClaims = RequireAuth):
            return {"token_id": claims.jti}
    """
    if not settings.auth_enabled:
        return None

    if credentials is None:
        logger.info("Rejected request: missing bearer token")
        raise MissingTokenError("Missing authorization header")

    try:
        return tokens.verify(credentials.credentials)
    except AuthenticationError as e:
        logger.info("Rejected request: %s", e.code)
        raise


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_claims)
