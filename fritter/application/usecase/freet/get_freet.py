"""Get freet use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.model import Freet
from fritter.domain.service import FreetService
from fritter.domain.value import FreetId


class FreetItem(BaseModel):
    """Freet as exposed over the API."""

    freet_id: str
    user_id: str
    profile_name: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_freet(cls, freet: Freet) -> "FreetItem":
        """Build an item from a domain freet."""
        return cls(
            freet_id=str(freet.id),
            user_id=str(freet.user_id),
            profile_name=freet.profile_name,
            content=freet.content,
            created_at=freet.created_at,
            updated_at=freet.updated_at,
        )


class GetFreetRequest(BaseModel):
    """Get freet request."""

    freet_id: str  # UUID string


class GetFreetUseCase(BaseUseCase):
    """Use case for reading a single freet."""

    def __init__(self, freet_service: FreetService) -> None:
        self.freet_service = freet_service

    async def execute(self, request: GetFreetRequest) -> FreetItem:
        """Execute get freet flow.

        Raises:
            NotFoundError: If the freet does not exist
        """
        freet = await self.freet_service.require_freet(FreetId(UUID(request.freet_id)))
        return FreetItem.from_freet(freet)
