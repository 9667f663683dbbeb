"""Tests for user input validation."""

import pytest

from modules.users.models import UserInput, Violation
from modules.users.validator import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    NAME_TOO_SHORT,
    is_valid_email,
    violations_from_errors,
    validate_user_input,
)


class TestValidateUserInput:
    def test_valid_input(self):
        """A well-formed payload should produce no violations."""
        assert validate_user_input(UserInput(name="Al", email="al@x.com")) == []

    def test_empty_name(self):
        """An empty name should produce exactly one required violation."""
        violations = validate_user_input(UserInput(name="", email="a@b.com"))
        assert violations == [Violation(field="name", message=NAME_REQUIRED)]

    def test_whitespace_name_is_required(self):
        """A whitespace-only name should count as missing."""
        violations = validate_user_input(UserInput(name="   ", email="a@b.com"))
        assert violations == [Violation(field="name", message=NAME_REQUIRED)]

    def test_short_name(self):
        """A one-character name should be too short."""
        violations = validate_user_input(UserInput(name="A", email="a@b.com"))
        assert violations == [Violation(field="name", message=NAME_TOO_SHORT)]

    def test_invalid_email(self):
        """A malformed email should produce one email violation."""
        violations = validate_user_input(UserInput(name="Al", email="not-an-email"))
        assert violations == [Violation(field="email", message=EMAIL_INVALID)]

    def test_short_name_and_invalid_email(self):
        """Violations on both fields should be collected."""
        violations = validate_user_input(UserInput(name="A", email="not-an-email"))
        assert [v.field for v in violations] == ["name", "email"]

    def test_both_empty(self):
        """Two empty fields should give two required violations in order."""
        violations = validate_user_input(UserInput(name="", email=""))
        assert violations == [
            Violation(field="name", message=NAME_REQUIRED),
            Violation(field="email", message=EMAIL_REQUIRED),
        ]

    def test_missing_fields_default_to_empty(self):
        """Fields absent from the payload should be reported as required."""
        violations = validate_user_input(UserInput())
        assert [v.message for v in violations] == [NAME_REQUIRED, EMAIL_REQUIRED]

    def test_messages(self):
        """Messages should read as user-facing sentences."""
        assert NAME_REQUIRED == "Name is required."
        assert NAME_TOO_SHORT == "Name must be at least 2 characters."
        assert EMAIL_REQUIRED == "Email is required."
        assert EMAIL_INVALID == "Email must be valid."

    def test_deterministic(self):
        """Validating the same input twice should give the same answer."""
        user_input = UserInput(name="A", email="bad")
        assert validate_user_input(user_input) == validate_user_input(user_input)


class TestIsValidEmail:
    @pytest.mark.parametrize(
        "email",
        [
            "al@x.com",
            "first.last@mail.co.uk",
            "a+tag@b.org",
            "a@mail.test",
            "a@host.local",
            "a@x.invalid",
            "\"q\"@x.com",
            "a@b.c",
            "a@123.com",
        ],
    )
    def test_accepts(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        ["not-an-email", "@x.com", "al@", "al@nodot", "a b@x.com", "al@@x.com"],
    )
    def test_rejects(self, email):
        assert not is_valid_email(email)


class TestViolationsFromErrors:
    def test_field_from_body_location(self):
        errors = [{"loc": ("body", "name"), "msg": "Input should be a valid string"}]
        assert violations_from_errors(errors) == [
            Violation(field="name", message="Input should be a valid string")
        ]

    def test_json_decode_error_reported_on_body(self):
        """Positional locations should not be used as field names."""
        errors = [{"loc": ("body", 1), "msg": "JSON decode error"}]
        assert violations_from_errors(errors)[0].field == "body"

    def test_path_parameter(self):
        errors = [{"loc": ("path", "user_id"), "msg": "Input should be a valid integer"}]
        assert violations_from_errors(errors)[0].field == "user_id"

    def test_empty_location(self):
        assert violations_from_errors([{"loc": (), "msg": "bad"}])[0].field == "body"
