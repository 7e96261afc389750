"""Follow and unfollow profile use cases."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import ProfileService
from fritter.domain.value import ProfileName, UserId

from .list_profiles import ProfileItem


class FollowRequest(BaseModel):
    """Follow or unfollow request."""

    user_id: str  # User ID from authenticated user
    name: str  # Caller's profile doing the following
    other_user_id: str  # Owner of the other profile
    other_name: str


class FollowResponse(BaseModel):
    """Follow or unfollow response."""

    message: str
    profile: ProfileItem


class FollowProfileUseCase(BaseUseCase):
    """Use case for following another profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Execute follow flow.

        Raises:
            NotFoundError: If either profile does not exist
            BusinessRuleViolationError: If already following, or following itself
        """
        profile = await self.profile_service.follow(
            UserId(UUID(request.user_id)),
            ProfileName(request.name),
            UserId(UUID(request.other_user_id)),
            ProfileName(request.other_name),
        )
        return FollowResponse(
            message="The other profile was followed successfully.",
            profile=ProfileItem.from_profile(profile),
        )


class UnfollowProfileUseCase(BaseUseCase):
    """Use case for unfollowing another profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Execute unfollow flow.

        Raises:
            NotFoundError: If either profile does not exist
            BusinessRuleViolationError: If not following
        """
        profile = await self.profile_service.unfollow(
            UserId(UUID(request.user_id)),
            ProfileName(request.name),
            UserId(UUID(request.other_user_id)),
            ProfileName(request.other_name),
        )
        return FollowResponse(
            message="The other profile was unfollowed successfully.",
            profile=ProfileItem.from_profile(profile),
        )
