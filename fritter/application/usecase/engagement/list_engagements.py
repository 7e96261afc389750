"""List engagements use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.error import ValidationError
from fritter.domain.service import EngagementService
from fritter.domain.value import ProfileName, UserId

from .get_engagement import EngagementItem


class ListEngagementsRequest(BaseModel):
    """List engagements request."""

    user_id: str | None = None  # Only freets of this user
    profile_name: str | None = None  # Only freets under this profile (needs user_id)


class ListEngagementsResponse(BaseModel):
    """List engagements response."""

    engagements: list[EngagementItem]


class ListEngagementsUseCase(BaseUseCase):
    """Use case for listing engagement records, most recent freets first."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize list engagements use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: ListEngagementsRequest) -> ListEngagementsResponse:
        """Execute list engagements flow.

        Raises:
            ValidationError: If a profile filter is given without a user
        """
        with logfire.span(
            "list_engagements.execute",
            user_id=request.user_id,
            profile_name=request.profile_name,
        ):
            if request.profile_name is not None:
                if request.user_id is None:
                    raise ValidationError("profile_name requires user_id")
                engagements = await self.engagement_service.list_for_profile(
                    UserId(UUID(request.user_id)), ProfileName(request.profile_name)
                )
            elif request.user_id is not None:
                engagements = await self.engagement_service.list_for_user(
                    UserId(UUID(request.user_id))
                )
            else:
                engagements = await self.engagement_service.list_all()

            return ListEngagementsResponse(
                engagements=[EngagementItem.from_engagement(e) for e in engagements]
            )
