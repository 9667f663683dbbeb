"""
Users module interfaces.

The API layer depends on IUserService; the service depends on IUserStore.
Either can be swapped (e.g. for a database-backed store) without touching
the routes.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import User, UserInput


@runtime_checkable
class IUserStore(Protocol):
    """
    Storage contract for user records.

    Absent ids are reported through return values, never exceptions.
    Implementations must be safe to call from many threads at once.
    """

    def list(self) -> list[User]:
        """Return a point-in-time snapshot of all users."""
        ...

    def get(self, user_id: int) -> Optional[User]:
        """Return the user with this id, or None."""
        ...

    def create(self, user_input: UserInput) -> User:
        """Atomically allocate an id and insert the user."""
        ...

    def update(self, user_id: int, user_input: UserInput) -> Optional[User]:
        """Replace name/email of an existing user, or return None if absent."""
        ...

    def delete(self, user_id: int) -> bool:
        """Remove the user if present; return whether it was removed."""
        ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user directory operations.

    This protocol defines the contract that the users module exposes
    to the API layer.
    """

    async def list_users(self) -> list[User]:
        """
        List all users.

        Returns:
            Snapshot of all stored users
        """
        ...

    async def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        ...

    async def create_user(self, user_input: UserInput) -> User:
        """
        Validate and store a new user.

        Raises:
            UserValidationError: If the input breaks any rule
        """
        ...

    async def update_user(self, user_id: int, user_input: UserInput) -> User:
        """
        Validate and apply new name/email to an existing user.

        Raises:
            UserValidationError: If the input breaks any rule
            UserNotFoundError: If no user has this ID
        """
        ...

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        ...
