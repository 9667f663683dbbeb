"""
Shared infrastructure for Roster backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    RosterError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
)

__all__ = [
    "Settings",
    "get_settings",
    "RosterError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
]
