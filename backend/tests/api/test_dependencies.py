"""Tests for the service container."""

import logging
import pytest

from api.dependencies import (
    ServiceContainer,
    get_container,
    reset_container,
    get_user_service,
    get_token_service,
)
from modules.auth.exceptions import InvalidTokenError
from modules.auth.interfaces import ITokenService
from modules.users.interfaces import IUserService
from tests.conftest import make_settings


class TestServiceContainer:
    def test_services_are_cached(self):
        container = ServiceContainer(make_settings())
        assert container.users is container.users
        assert container.tokens is container.tokens
        assert container.user_store is container.user_store

    def test_services_implement_interfaces(self):
        container = ServiceContainer(make_settings())
        assert isinstance(container.users, IUserService)
        assert isinstance(container.tokens, ITokenService)

    def test_reset_gives_fresh_store(self):
        container = ServiceContainer(make_settings())
        store = container.user_store
        container.reset()
        assert container.user_store is not store

    def test_generates_secret_when_unset(self, caplog):
        """An empty secret should be replaced by a random one with a warning."""
        container = ServiceContainer(make_settings(jwt_secret=""))
        with caplog.at_level(logging.WARNING, logger="api.dependencies"):
            token = container.tokens.issue()
        assert container.tokens.verify(token).sub == "user"
        assert "ROSTER_JWT_SECRET is not set" in caplog.text

    def test_random_secrets_differ(self):
        """Separately generated secrets should not accept each other's tokens."""
        first = ServiceContainer(make_settings(jwt_secret=""))
        second = ServiceContainer(make_settings(jwt_secret=""))
        with pytest.raises(InvalidTokenError):
            second.tokens.verify(first.tokens.issue())

    def test_token_lifetime_from_settings(self):
        container = ServiceContainer(make_settings(token_lifetime_minutes=5))
        assert container.tokens.lifetime_seconds == 300


class TestContainerSingleton:
    def test_get_container_is_cached(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first

    def test_dependency_functions(self, container):
        assert get_user_service() is container.users
        assert get_token_service() is container.tokens
