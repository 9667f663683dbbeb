"""
Users module.

Handles the in-memory user directory and the validation that gates
changes to it.

Public API:
- IUserService: Interface for user operations
- IUserStore: Interface for user storage
- User, UserInput, Violation: Data models
- validate_user_input: Field validation
- User exceptions: UserNotFoundError, UserValidationError
"""

from .interfaces import IUserService, IUserStore
from .models import User, UserInput, Violation
from .validator import validate_user_input
from .exceptions import UserNotFoundError, UserValidationError

__all__ = [
    # Interfaces
    "IUserService",
    "IUserStore",
    # Models
    "User",
    "UserInput",
    "Violation",
    # Validation
    "validate_user_input",
    # Exceptions
    "UserNotFoundError",
    "UserValidationError",
]
