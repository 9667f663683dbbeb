"""
Authentication module data models.

These models define the claims carried by issued tokens and the
response returned when a token is issued.
"""

from typing import Optional
from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Decoded and verified token claims.

    Tokens prove possession of a credential issued by this service; the
    subject is a fixed value and does not identify a particular user.
    """

    sub: str = Field(..., description="Subject")
    jti: str = Field(..., description="Unique token ID")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class TokenResponse(BaseModel):
    """Response from the token endpoint."""

    token: str = Field(..., description="Signed bearer token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Seconds until the token expires")
