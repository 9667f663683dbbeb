"""
Authentication module interface.

Other modules should depend on ITokenService, not the concrete implementation.
This enables testing with mocks and swapping the signing scheme later.
"""

from typing import Protocol, runtime_checkable

from .models import TokenClaims


@runtime_checkable
class ITokenService(Protocol):
    """
    Interface for issuing and verifying bearer tokens.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    @property
    def lifetime_seconds(self) -> int:
        """Seconds an issued token stays valid."""
        ...

    def issue(self) -> str:
        """
        Issue a new signed token.

        Returns:
            Encoded token string
        """
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry.

        Args:
            token: Encoded token string

        Returns:
            The verified claims

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...
