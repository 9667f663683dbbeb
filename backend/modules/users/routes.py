"""
User API endpoints.

Provides REST endpoints for user CRUD operations. Every route requires a
bearer token unless authentication is disabled in settings.
"""

import json
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError as PydanticValidationError

from api.middleware.auth import RequireAuth
from api.dependencies import get_user_service
from api.models.errors import ErrorResponse
from modules.auth.models import TokenClaims

from .interfaces import IUserService
from .models import User, UserInput, Violation
from .exceptions import UserValidationError
from .validator import violations_from_errors

router = APIRouter(
    dependencies=[RequireAuth],
    responses={401: {"model": ErrorResponse}},
)


async def read_user_input(
    request: Request,
    claims: Optional[TokenClaims] = RequireAuth,
) -> UserInput:
    """
    Dependency that parses the request body into a UserInput.

    Depends on the auth check, so the body is never read for a request
    that is about to be rejected with 401.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise UserValidationError([Violation(field="body", message="JSON decode error")])

    try:
        return UserInput.model_validate(payload)
    except PydanticValidationError as e:
        raise UserValidationError(violations_from_errors(e.errors()))


@router.get("", response_model=list[User])
async def list_users(
    service: IUserService = Depends(get_user_service),
) -> list[User]:
    """
    List all users.
    """
    return await service.list_users()


@router.get(
    "/{user_id}",
    response_model=User,
    responses={404: {"model": ErrorResponse}},
)
async def get_user(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Get a single user by ID.
    """
    return await service.get_user(user_id)


@router.post(
    "",
    response_model=User,
    status_code=201,
    responses={400: {"model": list[Violation]}},
)
async def create_user(
    response: Response,
    user_input: UserInput = Depends(read_user_input),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Create a user.

    The new user's location is returned in the Location header.
    """
    user = await service.create_user(user_input)
    response.headers["Location"] = f"/users/{user.id}"
    return user


@router.put(
    "/{user_id}",
    response_model=User,
    responses={400: {"model": list[Violation]}, 404: {"model": ErrorResponse}},
)
async def update_user(
    user_id: int,
    user_input: UserInput = Depends(read_user_input),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Replace a user's name and email. The ID never changes.
    """
    return await service.update_user(user_id, user_input)


@router.delete(
    "/{user_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
async def delete_user(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> None:
    """
    Delete a user.
    """
    await service.delete_user(user_id)
