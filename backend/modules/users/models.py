"""
Users module data models.

These models define the user record held by the store and the
unvalidated payload clients submit to create or update one.
"""

from pydantic import BaseModel, Field


class UserInput(BaseModel):
    """
    Candidate user data submitted by a client.

    Nothing is enforced here; missing fields default to empty strings so
    the validator reports them as required.
    """

    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Email address")


class User(BaseModel):
    """
    A stored user record.

    Records are immutable. Updates install a new instance in the store
    rather than mutating one that other callers may be holding.
    """

    id: int = Field(..., description="Identifier assigned by the store")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")

    model_config = {"frozen": True}


class Violation(BaseModel):
    """A single field-level validation failure."""

    field: str = Field(..., description="Name of the offending field")
    message: str = Field(..., description="Human-readable reason")

    model_config = {"frozen": True}
