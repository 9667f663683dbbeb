"""
Authentication module.

Issues and verifies bearer tokens signed with the shared secret.

Public API:
- ITokenService: Interface for token operations
- TokenClaims: Verified claims of a token
- TokenResponse: Body returned by the token endpoint
- Auth exceptions: InvalidTokenError, ExpiredTokenError, MissingTokenError
"""

from .interfaces import ITokenService
from .models import TokenClaims, TokenResponse
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

__all__ = [
    # Interface
    "ITokenService",
    # Models
    "TokenClaims",
    "TokenResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
]
