"""Update freet use case."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import FreetService
from fritter.domain.value import FreetId, UserId

from .get_freet import FreetItem


class UpdateFreetRequest(BaseModel):
    """Update freet request."""

    freet_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str


class UpdateFreetUseCase(BaseUseCase):
    """Use case for editing the text of a freet."""

    def __init__(self, freet_service: FreetService) -> None:
        """Initialize update freet use case.

        Args:
            freet_service: Freet domain service
        """
        self.freet_service = freet_service

    async def execute(self, request: UpdateFreetRequest) -> FreetItem:
        """Execute update freet flow.

        Raises:
            NotFoundError: If the freet does not exist
            NotAuthorizedError: If the user does not own the freet
        """
        freet = await self.freet_service.update_content(
            FreetId(UUID(request.freet_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        return FreetItem.from_freet(freet)
