"""List reflections use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from fritter.application.usecase.base import BaseUseCase
from fritter.domain.model import Reflection
from fritter.domain.service import ReflectionService
from fritter.domain.value import ProfileName, UserId


class ReflectionItem(BaseModel):
    """Reflection as exposed to its author."""

    reflection_id: str
    profile_name: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_reflection(cls, reflection: Reflection) -> "ReflectionItem":
        """Build an item from a domain reflection."""
        return cls(
            reflection_id=str(reflection.id),
            profile_name=reflection.profile_name,
            content=reflection.content,
            created_at=reflection.created_at,
            updated_at=reflection.updated_at,
        )


class ListReflectionsRequest(BaseModel):
    """List reflections request."""

    user_id: str  # User ID from authenticated user
    profile_name: str | None = None


class ListReflectionsResponse(BaseModel):
    """List reflections response."""

    reflections: list[ReflectionItem]


class ListReflectionsUseCase(BaseUseCase):
    """Use case for listing the caller's own reflections."""

    def __init__(self, reflection_service: ReflectionService) -> None:
        self.reflection_service = reflection_service

    async def execute(self, request: ListReflectionsRequest) -> ListReflectionsResponse:
        """Execute list reflections flow."""
        reflections = await self.reflection_service.list_own(
            UserId(UUID(request.user_id)),
            ProfileName(request.profile_name) if request.profile_name else None,
        )
        return ListReflectionsResponse(
            reflections=[ReflectionItem.from_reflection(r) for r in reflections]
        )
