"""Reflection routes.

Reflections are private, so every route acts on the caller's own.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from fritter.application.usecase.reflection import (
    CreateReflectionRequest,
    CreateReflectionResponse,
    CreateReflectionUseCase,
    DeleteReflectionRequest,
    DeleteReflectionResponse,
    DeleteReflectionUseCase,
    ListReflectionsRequest,
    ListReflectionsResponse,
    ListReflectionsUseCase,
    UpdateReflectionRequest,
    UpdateReflectionResponse,
    UpdateReflectionUseCase,
)
from fritter.domain.error import DomainError
from fritter.domain.service import JWTService
from fritter.domain.value import MAX_FREET_LENGTH
from fritter.interface.api.auth import require_user_id
from fritter.interface.error import http_error_from

router = APIRouter(
    prefix="/reflections", tags=["reflections"], route_class=DishkaRoute
)


class CreateReflectionAPIRequest(BaseModel):
    """API request for writing a reflection."""

    content: str = Field(min_length=1, max_length=MAX_FREET_LENGTH)
    profile_name: str | None = Field(default=None, max_length=50)


class UpdateReflectionAPIRequest(BaseModel):
    """API request for editing a reflection."""

    content: str = Field(min_length=1, max_length=MAX_FREET_LENGTH)


def _bad_request(action: str, error: ValueError) -> HTTPException:
    logfire.warn(f"Reflection {action} validation error", error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get("", response_model=ListReflectionsResponse)
async def list_reflections(
    list_reflections_use_case: FromDishka[ListReflectionsUseCase],
    jwt_service: FromDishka[JWTService],
    profile_name: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ListReflectionsResponse:
    """List the caller's reflections, most recently modified first.

    Args:
        list_reflections_use_case: List reflections use case from DI
        jwt_service: JWT service for token verification (injected)
        profile_name: Only reflections filed under this profile
        auth_token: JWT token from cookie
    """
    user_id = require_user_id(jwt_service, auth_token, "read reflections")

    try:
        return await list_reflections_use_case.execute(
            ListReflectionsRequest(user_id=user_id, profile_name=profile_name)
        )
    except ValueError as e:
        raise _bad_request("listing", e)


@router.post(
    "", response_model=CreateReflectionResponse, status_code=status.HTTP_201_CREATED
)
async def create_reflection(
    request: CreateReflectionAPIRequest,
    create_reflection_use_case: FromDishka[CreateReflectionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReflectionResponse:
    """Write a reflection, optionally under a named profile."""
    user_id = require_user_id(jwt_service, auth_token, "write reflections")

    try:
        return await create_reflection_use_case.execute(
            CreateReflectionRequest(
                user_id=user_id,
                content=request.content,
                profile_name=request.profile_name,
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        raise _bad_request("creation", e)


@router.put("/{reflection_id}", response_model=UpdateReflectionResponse)
async def update_reflection(
    reflection_id: UUID,
    request: UpdateReflectionAPIRequest,
    update_reflection_use_case: FromDishka[UpdateReflectionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateReflectionResponse:
    """Edit one of the caller's reflections."""
    user_id = require_user_id(jwt_service, auth_token, "edit reflections")

    try:
        return await update_reflection_use_case.execute(
            UpdateReflectionRequest(
                reflection_id=str(reflection_id),
                user_id=user_id,
                content=request.content,
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        raise _bad_request("update", e)


@router.delete("/{reflection_id}", response_model=DeleteReflectionResponse)
async def delete_reflection(
    reflection_id: UUID,
    delete_reflection_use_case: FromDishka[DeleteReflectionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteReflectionResponse:
    """Delete one of the caller's reflections."""
    user_id = require_user_id(jwt_service, auth_token, "delete reflections")

    try:
        return await delete_reflection_use_case.execute(
            DeleteReflectionRequest(reflection_id=str(reflection_id), user_id=user_id)
        )
    except DomainError as e:
        raise http_error_from(e) from e
