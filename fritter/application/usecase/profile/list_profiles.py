"""List profiles use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.model import Profile
from fritter.domain.service import ProfileService
from fritter.domain.value import ProfileRef, UserId


class ProfileItem(BaseModel):
    """Profile as exposed over the API."""

    profile_id: str
    user_id: str
    name: str
    following: list[ProfileRef]
    followers: list[ProfileRef]
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileItem":
        """Build an item from a domain profile."""
        return cls(
            profile_id=str(profile.id),
            user_id=str(profile.user_id),
            name=profile.name.root,
            following=profile.following,
            followers=profile.followers,
            created_at=profile.created_at,
        )


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    user_id: str | None = None  # Only profiles of this user


class ListProfilesResponse(BaseModel):
    """List profiles response."""

    profiles: list[ProfileItem]


class ListProfilesUseCase(BaseUseCase):
    """Use case for listing profiles."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        """Execute list profiles flow."""
        if request.user_id is not None:
            profiles = await self.profile_service.list_for_user(
                UserId(UUID(request.user_id))
            )
        else:
            profiles = await self.profile_service.list_profiles()

        return ListProfilesResponse(
            profiles=[ProfileItem.from_profile(p) for p in profiles]
        )
