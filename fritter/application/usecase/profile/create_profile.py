"""Create profile use case."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import ProfileService
from fritter.domain.value import ProfileName, UserId

from .list_profiles import ProfileItem


class CreateProfileRequest(BaseModel):
    """Create profile request."""

    user_id: str  # User ID from authenticated user
    name: str


class CreateProfileResponse(BaseModel):
    """Create profile response."""

    message: str
    profile: ProfileItem


class CreateProfileUseCase(BaseUseCase):
    """Use case for creating a named profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize create profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CreateProfileRequest) -> CreateProfileResponse:
        """Execute create profile flow.

        Raises:
            BusinessRuleViolationError: If the name is already taken by the user
        """
        profile = await self.profile_service.create_profile(
            UserId(UUID(request.user_id)), ProfileName(request.name)
        )
        return CreateProfileResponse(
            message="Your profile was created successfully.",
            profile=ProfileItem.from_profile(profile),
        )
