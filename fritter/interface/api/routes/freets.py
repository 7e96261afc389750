"""Freet routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from fritter.application.usecase.freet import (
    CreateFreetRequest,
    CreateFreetUseCase,
    DeleteFreetRequest,
    DeleteFreetResponse,
    DeleteFreetUseCase,
    FreetItem,
    GetFreetRequest,
    GetFreetUseCase,
    ListFreetsRequest,
    ListFreetsResponse,
    ListFreetsUseCase,
    UpdateFreetRequest,
    UpdateFreetUseCase,
)
from fritter.domain.error import DomainError
from fritter.domain.service import JWTService
from fritter.domain.value import MAX_FREET_LENGTH
from fritter.interface.api.auth import require_user_id
from fritter.interface.error import http_error_from

router = APIRouter(prefix="/freets", tags=["freets"], route_class=DishkaRoute)


class CreateFreetAPIRequest(BaseModel):
    """API request for posting a freet."""

    content: str = Field(min_length=1, max_length=MAX_FREET_LENGTH)
    profile_name: str | None = Field(default=None, max_length=50)


class UpdateFreetAPIRequest(BaseModel):
    """API request for editing a freet."""

    content: str = Field(min_length=1, max_length=MAX_FREET_LENGTH)


@router.get("", response_model=ListFreetsResponse)
async def list_freets(
    list_freets_use_case: FromDishka[ListFreetsUseCase],
    user_id: UUID | None = None,
    profile_name: str | None = None,
) -> ListFreetsResponse:
    """List freets, most recently modified first.

    Args:
        list_freets_use_case: List freets use case from DI
        user_id: Only freets of this user
        profile_name: Only freets under this profile (needs user_id)
    """
    try:
        return await list_freets_use_case.execute(
            ListFreetsRequest(
                user_id=str(user_id) if user_id else None,
                profile_name=profile_name,
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        logfire.warn("Freet listing validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{freet_id}", response_model=FreetItem)
async def get_freet(
    freet_id: UUID,
    get_freet_use_case: FromDishka[GetFreetUseCase],
) -> FreetItem:
    """Get a freet by ID."""
    try:
        return await get_freet_use_case.execute(GetFreetRequest(freet_id=str(freet_id)))
    except DomainError as e:
        raise http_error_from(e) from e


@router.post("", response_model=FreetItem, status_code=status.HTTP_201_CREATED)
async def create_freet(
    request: CreateFreetAPIRequest,
    create_freet_use_case: FromDishka[CreateFreetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FreetItem:
    """Post a new freet.

    The freet starts with an empty engagement record.

    Args:
        request: Freet content and optional profile
        create_freet_use_case: Create freet use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created freet

    Raises:
        HTTPException: If not authenticated, the profile is unknown, or
            validation fails
    """
    user_id = require_user_id(jwt_service, auth_token, "post freets")

    try:
        return await create_freet_use_case.execute(
            CreateFreetRequest(
                user_id=user_id,
                content=request.content,
                profile_name=request.profile_name,
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        logfire.warn("Freet creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put("/{freet_id}", response_model=FreetItem)
async def update_freet(
    freet_id: UUID,
    request: UpdateFreetAPIRequest,
    update_freet_use_case: FromDishka[UpdateFreetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FreetItem:
    """Edit the text of a freet.

    Only the author can edit.
    """
    user_id = require_user_id(jwt_service, auth_token, "edit freets")

    try:
        return await update_freet_use_case.execute(
            UpdateFreetRequest(
                freet_id=str(freet_id), user_id=user_id, content=request.content
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        logfire.warn("Freet update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{freet_id}", response_model=DeleteFreetResponse)
async def delete_freet(
    freet_id: UUID,
    delete_freet_use_case: FromDishka[DeleteFreetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteFreetResponse:
    """Delete a freet together with its engagement record.

    Only the author can delete.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete freets")

    try:
        return await delete_freet_use_case.execute(
            DeleteFreetRequest(freet_id=str(freet_id), user_id=user_id)
        )
    except DomainError as e:
        raise http_error_from(e) from e
