"""Profile routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from fritter.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
    FollowProfileUseCase,
    FollowRequest,
    FollowResponse,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    UnfollowProfileUseCase,
)
from fritter.domain.error import DomainError
from fritter.domain.service import JWTService
from fritter.interface.api.auth import require_user_id
from fritter.interface.error import http_error_from

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class CreateProfileAPIRequest(BaseModel):
    """API request for creating a profile."""

    name: str = Field(min_length=1, max_length=50)


class FollowAPIRequest(BaseModel):
    """API request for following or unfollowing a profile."""

    name: str = Field(min_length=1, max_length=50)  # Caller's own profile
    other_user_id: UUID
    other_name: str = Field(min_length=1, max_length=50)


@router.get("", response_model=ListProfilesResponse)
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
    user_id: UUID | None = None,
) -> ListProfilesResponse:
    """List profiles, optionally only those of one user."""
    return await list_profiles_use_case.execute(
        ListProfilesRequest(user_id=str(user_id) if user_id else None)
    )


@router.post(
    "", response_model=CreateProfileResponse, status_code=status.HTTP_201_CREATED
)
async def create_profile(
    request: CreateProfileAPIRequest,
    create_profile_use_case: FromDishka[CreateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateProfileResponse:
    """Create a named profile for the caller.

    Raises:
        HTTPException: If not authenticated or the name is taken
    """
    user_id = require_user_id(jwt_service, auth_token, "create profiles")

    try:
        return await create_profile_use_case.execute(
            CreateProfileRequest(user_id=user_id, name=request.name)
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        logfire.warn("Profile creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put("/follow", response_model=FollowResponse)
async def follow_profile(
    request: FollowAPIRequest,
    follow_profile_use_case: FromDishka[FollowProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    """Make one of the caller's profiles follow another profile."""
    user_id = require_user_id(jwt_service, auth_token, "follow profiles")

    try:
        return await follow_profile_use_case.execute(
            FollowRequest(
                user_id=user_id,
                name=request.name,
                other_user_id=str(request.other_user_id),
                other_name=request.other_name,
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put("/unfollow", response_model=FollowResponse)
async def unfollow_profile(
    request: FollowAPIRequest,
    unfollow_profile_use_case: FromDishka[UnfollowProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    """Make one of the caller's profiles stop following another profile."""
    user_id = require_user_id(jwt_service, auth_token, "unfollow profiles")

    try:
        return await unfollow_profile_use_case.execute(
            FollowRequest(
                user_id=user_id,
                name=request.name,
                other_user_id=str(request.other_user_id),
                other_name=request.other_name,
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{name}", response_model=DeleteProfileResponse)
async def delete_profile(
    name: str,
    delete_profile_use_case: FromDishka[DeleteProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteProfileResponse:
    """Delete one of the caller's profiles with its freets and reflections.

    Args:
        name: Profile name
        delete_profile_use_case: Delete profile use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Confirmation and number of freets and reflections removed

    Raises:
        HTTPException: If not authenticated, the profile is unknown, or
            the cascade could not finish
    """
    user_id = require_user_id(jwt_service, auth_token, "delete profiles")

    try:
        return await delete_profile_use_case.execute(
            DeleteProfileRequest(user_id=user_id, name=name)
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
