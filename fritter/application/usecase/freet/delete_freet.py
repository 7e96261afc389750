"""Delete freet use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.error import NotAuthorizedError
from fritter.domain.service import FreetService
from fritter.domain.value import FreetId, UserId


class DeleteFreetRequest(BaseModel):
    """Delete freet request."""

    freet_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteFreetResponse(BaseModel):
    """Delete freet response."""

    message: str


class DeleteFreetUseCase(BaseUseCase):
    """Use case for deleting a freet and its engagement record."""

    def __init__(self, freet_service: FreetService) -> None:
        """Initialize delete freet use case.

        Args:
            freet_service: Freet domain service
        """
        self.freet_service = freet_service

    async def execute(self, request: DeleteFreetRequest) -> DeleteFreetResponse:
        """Execute delete freet flow.

        Raises:
            NotFoundError: If the freet does not exist
            NotAuthorizedError: If the user does not own the freet
        """
        freet_id = FreetId(UUID(request.freet_id))
        user_id = UserId(UUID(request.user_id))

        freet = await self.freet_service.require_freet(freet_id)
        if not freet.is_owned_by(user_id):
            logfire.warn(
                "Unauthorized freet delete",
                freet_id=request.freet_id,
                user_id=request.user_id,
            )
            raise NotAuthorizedError("freet", request.freet_id, request.user_id)

        await self.freet_service.delete_freet(freet_id)
        return DeleteFreetResponse(message="Your freet was deleted successfully.")
