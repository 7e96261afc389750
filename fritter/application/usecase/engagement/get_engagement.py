"""Get engagement use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.model import Engagement
from fritter.domain.service import EngagementService
from fritter.domain.value import FreetId


class EngagementItem(BaseModel):
    """Engagement record as exposed over the API."""

    engagement_id: str
    freet_id: str
    likes: int
    dislikes: int
    liked: list[str]
    disliked: list[str]
    is_controversial: bool
    updated_at: datetime

    @classmethod
    def from_engagement(cls, engagement: Engagement) -> "EngagementItem":
        """Build an item from a domain record."""
        return cls(
            engagement_id=str(engagement.id),
            freet_id=str(engagement.freet_id),
            likes=engagement.likes,
            dislikes=engagement.dislikes,
            liked=sorted(str(voter) for voter in engagement.liked),
            disliked=sorted(str(voter) for voter in engagement.disliked),
            is_controversial=engagement.is_controversial,
            updated_at=engagement.updated_at,
        )


class GetEngagementRequest(BaseModel):
    """Get engagement request."""

    freet_id: str  # UUID string


class GetEngagementUseCase(BaseUseCase):
    """Use case for reading the engagement record of one freet."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: GetEngagementRequest) -> EngagementItem:
        """Execute get engagement flow.

        Raises:
            NotFoundError: If the freet has no engagement record
        """
        engagement = await self.engagement_service.require(
            FreetId(UUID(request.freet_id))
        )
        return EngagementItem.from_engagement(engagement)
