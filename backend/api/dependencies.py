"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container owns the process-wide state: one user store and one
signing secret. Nothing else in the code base holds them.
"""

import logging
import secrets
from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ITokenService
    from modules.users.interfaces import IUserService, IUserStore

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._user_store: "IUserStore | None" = None
        self._user_service: "IUserService | None" = None
        self._token_service: "ITokenService | None" = None

    @property
    def settings(self) -> Settings:
        """Get the settings this container was built with."""
        return self._settings

    @property
    def user_store(self) -> "IUserStore":
        """Get the user store instance."""
        if self._user_store is None:
            from modules.users.store import InMemoryUserStore
            self._user_store = InMemoryUserStore()
        return self._user_store

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                store=self.user_store,
                validation_enabled=self._settings.validation_enabled,
            )
        return self._user_service

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.service import TokenService
            secret = self._settings.jwt_secret
            if not secret:
                logger.warning(
                    "ROSTER_JWT_SECRET is not set; using a random signing secret. "
                    "Issued tokens will not survive a restart."
                )
                secret = secrets.token_urlsafe(32)
            self._token_service = TokenService(
                secret=secret,
                lifetime=timedelta(minutes=self._settings.token_lifetime_minutes),
                subject=self._settings.token_subject,
                algorithm=self._settings.jwt_algorithm,
            )
        return self._token_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_store = None
        self._user_service = None
        self._token_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def configure_container(settings: Settings) -> ServiceContainer:
    """
    Replace the container with one built from explicit settings.

    Used by tests that need a particular feature flag combination.
    """
    global _container
    _container = ServiceContainer(settings)
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_app_settings() -> Settings:
    """FastAPI dependency for the active settings."""
    return get_container().settings


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_token_service() -> "ITokenService":
    """FastAPI dependency for token service."""
    return get_container().tokens
