"""Tests for auth module exceptions."""

from modules.auth.exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)
from shared.exceptions import AuthenticationError


class TestAuthExceptions:
    def test_invalid_token_error(self):
        error = InvalidTokenError()
        assert error.code == "INVALID_TOKEN"
        assert error.message == "Invalid authentication token"

    def test_invalid_token_custom_message(self):
        error = InvalidTokenError("Invalid token: bad signature")
        assert str(error) == "Invalid token: bad signature"

    def test_expired_token_error(self):
        error = ExpiredTokenError()
        assert error.code == "TOKEN_EXPIRED"
        assert "expired" in error.message

    def test_missing_token_error(self):
        error = MissingTokenError()
        assert error.code == "MISSING_TOKEN"

    def test_all_are_authentication_errors(self):
        """Every auth exception should map to 401 via AuthenticationError."""
        for error in (InvalidTokenError(), ExpiredTokenError(), MissingTokenError()):
            assert isinstance(error, AuthenticationError)
