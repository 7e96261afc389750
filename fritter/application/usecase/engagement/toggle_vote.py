"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import EngagementService
from fritter.domain.value import FreetId, UserId, VoteKind

_MESSAGES = {
    VoteKind.LIKE: "Your freet was liked successfully.",
    VoteKind.DISLIKE: "Your freet was disliked successfully.",
}


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    freet_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    kind: VoteKind


class ToggleVoteResponse(BaseModel):
    """Toggle vote response."""

    message: str
    freet_id: str
    likes: int
    dislikes: int
    is_controversial: bool


class ToggleVoteUseCase(BaseUseCase):
    """Use case for liking or disliking a freet.

    Voting the same way twice cancels the vote; voting the other way
    switches it.
    """

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize toggle vote use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Raises:
            NotFoundError: If the freet has no engagement record
            InvalidTransitionError: If the stored record is corrupt
            ConcurrentUpdateError: If concurrent votes kept winning
        """
        freet_id = FreetId(UUID(request.freet_id))
        voter_id = UserId(UUID(request.user_id))

        engagement = await self.engagement_service.toggle_vote(
            freet_id, voter_id, request.kind
        )

        return ToggleVoteResponse(
            message=_MESSAGES[request.kind],
            freet_id=str(engagement.freet_id),
            likes=engagement.likes,
            dislikes=engagement.dislikes,
            is_controversial=engagement.is_controversial,
        )
