"""Create reflection use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import ProfileService, ReflectionService
from fritter.domain.value import DEFAULT_PROFILE_NAME, ProfileName, UserId

from .list_reflections import ReflectionItem


class CreateReflectionRequest(BaseModel):
    """Create reflection request."""

    user_id: str  # User ID from authenticated user
    content: str
    profile_name: str | None = None  # Defaults to the user's default profile


class CreateReflectionResponse(BaseModel):
    """Create reflection response."""

    message: str
    reflection: ReflectionItem


class CreateReflectionUseCase(BaseUseCase):
    """Use case for writing a private reflection."""

    def __init__(
        self, reflection_service: ReflectionService, profile_service: ProfileService
    ) -> None:
        """Initialize create reflection use case.

        Args:
            reflection_service: Reflection domain service
            profile_service: Profile domain service
        """
        self.reflection_service = reflection_service
        self.profile_service = profile_service

    async def execute(
        self, request: CreateReflectionRequest
    ) -> CreateReflectionResponse:
        """Execute create reflection flow.

        Raises:
            NotFoundError: If a named, non-default profile does not exist
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "create_reflection.execute",
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

            reflection = await self.reflection_service.create_reflection(
                user_id, request.content, profile_name
            )
            return CreateReflectionResponse(
                message="Your reflection was created successfully.",
                reflection=ReflectionItem.from_reflection(reflection),
            )
