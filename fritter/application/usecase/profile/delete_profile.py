"""Delete profile use case."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import ProfileService, ReflectionService
from fritter.domain.value import ProfileName, UserId


class DeleteProfileRequest(BaseModel):
    """Delete profile request."""

    user_id: str  # User ID from authenticated user
    name: str


class DeleteProfileResponse(BaseModel):
    """Delete profile response."""

    message: str
    deleted_freets: int
    deleted_reflections: int


class DeleteProfileUseCase(BaseUseCase):
    """Use case for deleting a profile with its freets and reflections."""

    def __init__(
        self, profile_service: ProfileService, reflection_service: ReflectionService
    ) -> None:
        """Initialize delete profile use case.

        Args:
            profile_service: Profile domain service
            reflection_service: Reflection domain service
        """
        self.profile_service = profile_service
        self.reflection_service = reflection_service

    async def execute(self, request: DeleteProfileRequest) -> DeleteProfileResponse:
        """Execute delete profile flow.

        Raises:
            NotFoundError: If the profile does not exist
            CascadeDeletionError: If some freets could not be cleaned up
        """
        user_id = UserId(UUID(request.user_id))
        name = ProfileName(request.name)

        deleted_freets = await self.profile_service.delete_profile(user_id, name)
        deleted_reflections = await self.reflection_service.delete_all_for_profile(
            user_id, name
        )
        return DeleteProfileResponse(
            message="Your profile has been deleted successfully.",
            deleted_freets=deleted_freets,
            deleted_reflections=deleted_reflections,
        )
