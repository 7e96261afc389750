"""Update reflection use case."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import ReflectionService
from fritter.domain.value import ReflectionId, UserId

from .list_reflections import ReflectionItem


class UpdateReflectionRequest(BaseModel):
    """Update reflection request."""

    reflection_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str


class UpdateReflectionResponse(BaseModel):
    """Update reflection response."""

    message: str
    reflection: ReflectionItem


class UpdateReflectionUseCase(BaseUseCase):
    """Use case for editing a reflection."""

    def __init__(self, reflection_service: ReflectionService) -> None:
        self.reflection_service = reflection_service

    async def execute(
        self, request: UpdateReflectionRequest
    ) -> UpdateReflectionResponse:
        """Execute update reflection flow.

        Raises:
            NotFoundError: If the reflection does not exist
            NotAuthorizedError: If the user is not the author
        """
        reflection = await self.reflection_service.update_content(
            ReflectionId(UUID(request.reflection_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        return UpdateReflectionResponse(
            message="Your reflection was updated successfully.",
            reflection=ReflectionItem.from_reflection(reflection),
        )
