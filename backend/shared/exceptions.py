"""
Base exception classes for the Roster backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status, so module code only
has to pick the right parent.
"""

from typing import Optional, Any


class RosterError(Exception):
    """
    Base exception for all Roster errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(RosterError):
    """Resource not found."""

    pass


class ValidationError(RosterError):
    """Input validation failed."""

    pass


class AuthenticationError(RosterError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ConflictError(RosterError):
    """Resource state conflicts with the request (e.g. a uniqueness rule)."""

    pass
