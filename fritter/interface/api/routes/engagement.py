"""Engagement routes: likes, dislikes and controversy."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from fritter.application.usecase.engagement import (
    EngagementItem,
    GetEngagementRequest,
    GetEngagementUseCase,
    ListEngagementsRequest,
    ListEngagementsResponse,
    ListEngagementsUseCase,
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from fritter.domain.error import DomainError
from fritter.domain.service import JWTService
from fritter.domain.value import VoteKind
from fritter.interface.api.auth import require_user_id
from fritter.interface.error import http_error_from

router = APIRouter(prefix="/engagement", tags=["engagement"], route_class=DishkaRoute)


async def _toggle(
    freet_id: UUID,
    kind: VoteKind,
    use_case: ToggleVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> ToggleVoteResponse:
    user_id = require_user_id(jwt_service, auth_token, f"{kind.value} freets")

    try:
        return await use_case.execute(
            ToggleVoteRequest(freet_id=str(freet_id), user_id=user_id, kind=kind)
        )
    except DomainError as e:
        raise http_error_from(e) from e


@router.put("/like/{freet_id}", response_model=ToggleVoteResponse)
async def like_freet(
    freet_id: UUID,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleVoteResponse:
    """Like a freet, or take the like back if already given.

    Requires authentication.

    Args:
        freet_id: Freet UUID
        toggle_vote_use_case: Toggle vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated tallies and controversy flag

    Raises:
        HTTPException: If not authenticated or the freet has no engagement record
    """
    return await _toggle(
        freet_id, VoteKind.LIKE, toggle_vote_use_case, jwt_service, auth_token
    )


@router.put("/dislike/{freet_id}", response_model=ToggleVoteResponse)
async def dislike_freet(
    freet_id: UUID,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleVoteResponse:
    """Dislike a freet, or take the dislike back if already given.

    Requires authentication.
    """
    return await _toggle(
        freet_id, VoteKind.DISLIKE, toggle_vote_use_case, jwt_service, auth_token
    )


@router.get("", response_model=ListEngagementsResponse)
async def list_engagements(
    list_engagements_use_case: FromDishka[ListEngagementsUseCase],
    user_id: UUID | None = None,
    profile_name: str | None = None,
) -> ListEngagementsResponse:
    """List engagement records, most recently modified freets first.

    Args:
        list_engagements_use_case: List engagements use case from DI
        user_id: Only records of this user's freets
        profile_name: Only records of freets under this profile (needs user_id)
    """
    try:
        return await list_engagements_use_case.execute(
            ListEngagementsRequest(
                user_id=str(user_id) if user_id else None,
                profile_name=profile_name,
            )
        )
    except DomainError as e:
        raise http_error_from(e) from e
    except ValueError as e:
        logfire.warn("Engagement listing validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{freet_id}", response_model=EngagementItem)
async def get_engagement(
    freet_id: UUID,
    get_engagement_use_case: FromDishka[GetEngagementUseCase],
) -> EngagementItem:
    """Get the engagement record of one freet."""
    try:
        return await get_engagement_use_case.execute(
            GetEngagementRequest(freet_id=str(freet_id))
        )
    except DomainError as e:
        raise http_error_from(e) from e
