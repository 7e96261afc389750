"""Create freet use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import FreetService, ProfileService
from fritter.domain.value import DEFAULT_PROFILE_NAME, ProfileName, UserId

from .get_freet import FreetItem


class CreateFreetRequest(BaseModel):
    """Create freet request."""

    user_id: str  # User ID from authenticated user
    content: str
    profile_name: str | None = None  # Defaults to the user's default profile


class CreateFreetUseCase(BaseUseCase):
    """Use case for posting a new freet."""

    def __init__(
        self, freet_service: FreetService, profile_service: ProfileService
    ) -> None:
        """Initialize create freet use case.

        Args:
            freet_service: Freet domain service
            profile_service: Profile domain service
        """
        self.freet_service = freet_service
        self.profile_service = profile_service

    async def execute(self, request: CreateFreetRequest) -> FreetItem:
        """Execute create freet flow.

        Steps:
        1. Resolve the profile (every user implicitly owns the default one)
        2. Create the freet together with its engagement record

        Raises:
            NotFoundError: If a named, non-default profile does not exist
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "create_freet.execute",
            user_id=request.user_id,
            profile_name=request.profile_name,
        ):
            profile_name = None
            if request.profile_name is not None:
                requested = ProfileName(request.profile_name)
                if requested.key != DEFAULT_PROFILE_NAME:
                    profile = await self.profile_service.require_profile(
                        user_id, requested
                    )
                    profile_name = profile.name

            freet = await self.freet_service.create_freet(
                user_id, request.content, profile_name
            )
            return FreetItem.from_freet(freet)
