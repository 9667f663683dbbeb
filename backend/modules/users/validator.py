"""
User input validation.

Rules are evaluated per field in declaration order. Within a field the
first failing rule wins; across fields every violation is collected.
"""

from typing import Any, Callable, Optional, Sequence

from email_validator import EmailNotValidError, validate_email

from .models import UserInput, Violation

NAME_MIN_LENGTH = 2

NAME_REQUIRED = "Name is required."
NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters."
EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Email must be valid."


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def is_valid_email(value: str) -> bool:
    """Return True if value is a syntactically valid address with a dotted domain."""
    try:
        result = validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            allow_quoted_local=True,
        )
    except EmailNotValidError:
        return False
    return "." in result.domain


def _check_name(name: str) -> Optional[str]:
    if _is_blank(name):
        return NAME_REQUIRED
    if len(name) < NAME_MIN_LENGTH:
        return NAME_TOO_SHORT
    return None


def _check_email(email: str) -> Optional[str]:
    if _is_blank(email):
        return EMAIL_REQUIRED
    if not is_valid_email(email):
        return EMAIL_INVALID
    return None


# (field, check) pairs in the order violations are reported
RULES: list[tuple[str, Callable[[str], Optional[str]]]] = [
    ("name", _check_name),
    ("email", _check_email),
]


def validate_user_input(user_input: UserInput) -> list[Violation]:
    """
    Validate a candidate user payload.

    Args:
        user_input: The unvalidated payload

    Returns:
        Violations in rule order; an empty list means the input is valid
    """
    violations = []
    for field, check in RULES:
        message = check(getattr(user_input, field))
        if message is not None:
            violations.append(Violation(field=field, message=message))
    return violations


# Location prefixes FastAPI and pydantic put before the field name
_LOCATION_ROOTS = {"body", "path", "query", "header", "cookie"}


def violations_from_errors(errors: Sequence[dict[str, Any]]) -> list[Violation]:
    """
    Convert pydantic/FastAPI error dicts to violations.

    The field is the innermost named location; errors that only point at
    the body as a whole (e.g. undecodable JSON) are reported as "body".
    """
    violations = []
    for error in errors:
        names = [
            part for part in error.get("loc") or ()
            if isinstance(part, str) and part not in _LOCATION_ROOTS
        ]
        field = names[-1] if names else "body"
        violations.append(Violation(field=field, message=error.get("msg", "Invalid value")))
    return violations
