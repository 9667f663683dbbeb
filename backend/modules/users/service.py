"""
User service implementation.

Runs the validator before any mutation and turns the store's
None/False results into typed module exceptions for the API layer.
"""

import logging

from .interfaces import IUserService, IUserStore
from .models import User, UserInput
from .validator import validate_user_input
from .exceptions import UserNotFoundError, UserValidationError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    Implementation of the user directory service.

    Validation can be switched off to serve the unvalidated variant of
    the API; the store is always the single source of truth.
    """

    def __init__(self, store: IUserStore, validation_enabled: bool = True):
        self._store = store
        self._validation_enabled = validation_enabled

    def _validate(self, user_input: UserInput) -> None:
        if not self._validation_enabled:
            return
        violations = validate_user_input(user_input)
        if violations:
            logger.info(
                "Rejected user input: %s",
                ", ".join(f"{v.field}: {v.message}" for v in violations),
            )
            raise UserValidationError(violations)

    async def list_users(self) -> list[User]:
        return self._store.list()

    async def get_user(self, user_id: int) -> User:
        user = self._store.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def create_user(self, user_input: UserInput) -> User:
        self._validate(user_input)
        return self._store.create(user_input)

    async def update_user(self, user_id: int, user_input: UserInput) -> User:
        self._validate(user_input)
        user = self._store.update(user_id, user_input)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def delete_user(self, user_id: int) -> None:
        if not self._store.delete(user_id):
            raise UserNotFoundError(user_id)
