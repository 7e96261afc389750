"""Delete account use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import FreetService, ProfileService, ReflectionService
from fritter.domain.value import UserId


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    user_id: str  # User ID from authenticated user


class DeleteAccountResponse(BaseModel):
    """Delete account response."""

    message: str
    deleted_freets: int
    deleted_reflections: int
    deleted_profiles: int


class DeleteAccountUseCase(BaseUseCase):
    """Use case for removing everything a user owns."""

    def __init__(
        self,
        freet_service: FreetService,
        reflection_service: ReflectionService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize delete account use case.

        Args:
            freet_service: Freet domain service
            reflection_service: Reflection domain service
            profile_service: Profile domain service
        """
        self.freet_service = freet_service
        self.reflection_service = reflection_service
        self.profile_service = profile_service

    async def execute(self, request: DeleteAccountRequest) -> DeleteAccountResponse:
        """Execute delete account flow.

        Steps:
        1. Delete every freet with its engagement record
        2. Delete every reflection
        3. Delete every profile, unlinking it from other profiles

        Raises:
            CascadeDeletionError: If some freets could not be cleaned up;
                reflections and profiles are left in place in that case
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("delete_account.execute", user_id=request.user_id):
            deleted_freets = await self.freet_service.delete_all_for_user(user_id)
            deleted_reflections = await self.reflection_service.delete_all_for_user(
                user_id
            )
            deleted_profiles = await self.profile_service.delete_all_for_user(user_id)

            logfire.info(
                "Account content deleted",
                user_id=request.user_id,
                deleted_freets=deleted_freets,
                deleted_reflections=deleted_reflections,
                deleted_profiles=deleted_profiles,
            )
            return DeleteAccountResponse(
                message="Your account has been deleted successfully.",
                deleted_freets=deleted_freets,
                deleted_reflections=deleted_reflections,
                deleted_profiles=deleted_profiles,
            )
