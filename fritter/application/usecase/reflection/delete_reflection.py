"""Delete reflection use case."""

from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.service import ReflectionService
from fritter.domain.value import ReflectionId, UserId


class DeleteReflectionRequest(BaseModel):
    """Delete reflection request."""

    reflection_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteReflectionResponse(BaseModel):
    """Delete reflection response."""

    message: str


class DeleteReflectionUseCase(BaseUseCase):
    """Use case for deleting a reflection."""

    def __init__(self, reflection_service: ReflectionService) -> None:
        self.reflection_service = reflection_service

    async def execute(
        self, request: DeleteReflectionRequest
    ) -> DeleteReflectionResponse:
        """Execute delete reflection flow.

        Raises:
            NotFoundError: If the reflection does not exist
            NotAuthorizedError: If the user is not the author
        """
        await self.reflection_service.delete_reflection(
            ReflectionId(UUID(request.reflection_id)), UserId(UUID(request.user_id))
        )
        return DeleteReflectionResponse(
            message="Your reflection was deleted successfully."
        )
