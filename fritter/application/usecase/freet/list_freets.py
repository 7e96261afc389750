"""List freets use case."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.error import ValidationError
from fritter.domain.service import FreetService
from fritter.domain.value import ProfileName, UserId

from .get_freet import FreetItem


class ListFreetsRequest(BaseModel):
    """List freets request."""

    user_id: str | None = None  # Only freets of this user
    profile_name: str | None = None  # Only freets under this profile (needs user_id)


class ListFreetsResponse(BaseModel):
    """List freets response."""

    freets: list[FreetItem]


class ListFreetsUseCase(BaseUseCase):
    """Use case for listing freets, most recently modified first."""

    def __init__(self, freet_service: FreetService) -> None:
        """Initialize list freets use case.

        Args:
            freet_service: Freet domain service
        """
        self.freet_service = freet_service

    async def execute(self, request: ListFreetsRequest) -> ListFreetsResponse:
        """Execute list freets flow.

        Raises:
            ValidationError: If a profile filter is given without a user
        """
        if request.profile_name is not None:
            if request.user_id is None:
                raise ValidationError("profile_name requires user_id")
            freets = await self.freet_service.list_by_profile(
                UserId(UUID(request.user_id)), ProfileName(request.profile_name)
            )
        elif request.user_id is not None:
            freets = await self.freet_service.list_by_user(UserId(UUID(request.user_id)))
        else:
            freets = await self.freet_service.list_freets()

        return ListFreetsResponse(freets=[FreetItem.from_freet(f) for f in freets])
