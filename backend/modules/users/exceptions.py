"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError

from .models import Violation


class UserNotFoundError(NotFoundError):
    """Raised when no user exists with the requested id."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User with ID {user_id} not found.",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
        self.user_id = user_id


class UserValidationError(ValidationError):
    """Raised when a user payload fails one or more validation rules."""

    def __init__(self, violations: list[Violation]):
        super().__init__(
            f"User input failed validation ({len(violations)} violation(s))",
            code="USER_VALIDATION_FAILED",
            details={"violations": [v.model_dump() for v in violations]},
        )
        self.violations = violations
