"""
Token API endpoint.

Issues bearer tokens for the protected user routes. The endpoint itself
is public.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_token_service

from .interfaces import ITokenService
from .models import TokenResponse

router = APIRouter()


@router.post("", response_model=TokenResponse)
async def issue_token(
    tokens: ITokenService = Depends(get_token_service),
) -> TokenResponse:
    """
    Issue a new bearer token valid for the configured lifetime.
    """
    return TokenResponse(token=tokens.issue(), expires_in=tokens.lifetime_seconds)
