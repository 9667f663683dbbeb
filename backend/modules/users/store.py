"""
In-memory user store.

Holds every user record for the lifetime of the process. Nothing is
persisted; a restart starts again from an empty store with ids at 1.
"""

import logging
import threading
from typing import Optional

from .models import User, UserInput

logger = logging.getLogger(__name__)


class InMemoryUserStore:
    """
    Thread-safe mapping from user id to user record.

    A single lock guards both the id counter and the mapping, so
    allocating an id and inserting the record happen as one step and
    operations on the same id are totally ordered. Every critical section
    is a constant-time dict operation, except list() which copies the
    values.

    Records are frozen; update() swaps in a new record instead of
    mutating the old one, so a caller holding a record from list() or
    get() never sees it change underneath them.
    """

    def __init__(self, first_id: int = 1) -> None:
        self._users: dict[int, User] = {}
        self._next_id = first_id
        self._lock = threading.Lock()

    def list(self) -> list[User]:
        """Return a point-in-time snapshot of all users."""
        with self._lock:
            return list(self._users.values())

    def get(self, user_id: int) -> Optional[User]:
        """Return the user with this id, or None if absent."""
        with self._lock:
            return self._users.get(user_id)

    def create(self, user_input: UserInput) -> User:
        """Assign the next id and insert a new user."""
        with self._lock:
            user = User(id=self._next_id, name=user_input.name, email=user_input.email)
            self._users[user.id] = user
            self._next_id += 1
        logger.debug("Created user %d", user.id)
        return user

    def update(self, user_id: int, user_input: UserInput) -> Optional[User]:
        """Replace name and email of an existing user, or return None if absent."""
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            updated = current.model_copy(
                update={"name": user_input.name, "email": user_input.email}
            )
            self._users[user_id] = updated
        logger.debug("Updated user %d", user_id)
        return updated

    def delete(self, user_id: int) -> bool:
        """Remove a user. Returns whether anything was removed."""
        with self._lock:
            removed = self._users.pop(user_id, None) is not None
        if removed:
            logger.debug("Deleted user %d", user_id)
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
