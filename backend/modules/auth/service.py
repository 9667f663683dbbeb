"""
Token service implementation.

Issues and verifies HS256 JWTs signed with a single shared secret.
Issuer and audience are not checked; a token is valid if its signature
verifies and it has not expired.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union
import jwt

from .interfaces import ITokenService
from .models import TokenClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(hours=1)
DEFAULT_SUBJECT = "user"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService(ITokenService):
    """
    Implementation of the token service.

    The clock is injectable so expiry can be tested without waiting.
    Expiry is checked against that clock rather than PyJWT's own, which
    only ever sees wall time.
    """

    def __init__(
        self,
        secret: Union[str, bytes],
        lifetime: timedelta = DEFAULT_LIFETIME,
        subject: str = DEFAULT_SUBJECT,
        algorithm: str = "HS256",
        clock: Optional[Clock] = None,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._lifetime = lifetime
        self._subject = subject
        self._algorithm = algorithm
        self._clock = clock or utc_now

    @property
    def lifetime_seconds(self) -> int:
        return int(self._lifetime.total_seconds())

    def issue(self) -> str:
        """Issue a token for the fixed subject with a fresh unique ID."""
        now = self._clock()
        payload = {
            "sub": self._subject,
            "jti": str(uuid.uuid4()),
            "iat": int(now.timestamp()),
            "exp": int((now + self._lifetime).timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug("Issued token %s", payload["jti"])
        return token

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the current time is at or past expiry
            InvalidTokenError: If the signature or claims are bad
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "jti", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_aud": False,
                    "verify_iss": False,
                },
            )
            claims = TokenClaims(**payload)
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except (TypeError, ValueError) as e:
            # Claims decoded but have the wrong shape
            raise InvalidTokenError(f"Invalid token claims: {e}")

        if self._clock().timestamp() >= claims.exp:
            raise ExpiredTokenError()

        return claims
