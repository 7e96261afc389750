"""Reflection domain service.

Reflections are private: every read and write goes through the author.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from fritter.domain.error import NotAuthorizedError, NotFoundError
from fritter.domain.model.reflection import Reflection
from fritter.domain.repository import ReflectionRepository
from fritter.domain.value import DEFAULT_PROFILE_NAME, ProfileName, ReflectionId, UserId

from .base import Service


class ReflectionService(Service):
    """Domain service for private reflections."""

    def __init__(self, reflection_repository: ReflectionRepository) -> None:
        """Initialize reflection service.

        Args:
            reflection_repository: Reflection repository
        """
        self.reflection_repository = reflection_repository

    async def create_reflection(
        self,
        user_id: UserId,
        content: str,
        profile_name: ProfileName | None = None,
    ) -> Reflection:
        """Write a new reflection under one of the user's profiles.

        Args:
            user_id: Author
            content: Reflection text
            profile_name: Profile to file it under (default profile if None)

        Returns:
            Created reflection
        """
        name = profile_name.root if profile_name else DEFAULT_PROFILE_NAME

        with logfire.span(
            "reflection_service.create_reflection",
            user_id=str(user_id),
            profile_name=name,
        ):
            now = datetime.now()
            reflection = Reflection(
                id=ReflectionId(uuid4()),
                user_id=user_id,
                profile_name=name,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.reflection_repository.save(reflection)
            logfire.info("Reflection created", reflection_id=str(saved.id))
            return saved

    async def require_own(
        self, reflection_id: ReflectionId, user_id: UserId
    ) -> Reflection:
        """Get a reflection on behalf of its author.

        Raises:
            NotFoundError: If the reflection does not exist
            NotAuthorizedError: If the user is not the author
        """
        reflection = await self.reflection_repository.find_by_id(reflection_id)
        if reflection is None:
            raise NotFoundError("Reflection", str(reflection_id))
        if not reflection.is_owned_by(user_id):
            logfire.warn(
                "Reflection accessed by another user",
                reflection_id=str(reflection_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("reflection", str(reflection_id), str(user_id))
        return reflection

    async def list_own(
        self, user_id: UserId, profile_name: ProfileName | None = None
    ) -> list[Reflection]:
        """List the user's reflections, most recently modified first."""
        with logfire.span(
            "reflection_service.list_own",
            user_id=str(user_id),
            profile_name=str(profile_name) if profile_name else None,
        ):
            if profile_name is not None:
                return await self.reflection_repository.find_by_profile(
                    user_id, profile_name
                )
            return await self.reflection_repository.find_by_user(user_id)

    async def update_content(
        self, reflection_id: ReflectionId, user_id: UserId, content: str
    ) -> Reflection:
        """Replace the text of a reflection.

        Raises:
            NotFoundError: If the reflection does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "reflection_service.update_content", reflection_id=str(reflection_id)
        ):
            reflection = await self.require_own(reflection_id, user_id)
            updated = Reflection(
                id=reflection.id,
                user_id=reflection.user_id,
                profile_name=reflection.profile_name,
                content=content,
                created_at=reflection.created_at,
                updated_at=datetime.now(),
            )
            return await self.reflection_repository.save(updated)

    async def delete_reflection(
        self, reflection_id: ReflectionId, user_id: UserId
    ) -> None:
        """Delete a reflection.

        Raises:
            NotFoundError: If the reflection does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "reflection_service.delete_reflection", reflection_id=str(reflection_id)
        ):
            await self.require_own(reflection_id, user_id)
            await self.reflection_repository.delete(reflection_id)
            logfire.info("Reflection deleted", reflection_id=str(reflection_id))

    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Delete every reflection of a user.

        Returns:
            Number of reflections deleted
        """
        with logfire.span(
            "reflection_service.delete_all_for_user", user_id=str(user_id)
        ):
            return await self.reflection_repository.delete_by_user(user_id)

    async def delete_all_for_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> int:
        """Delete every reflection filed under one profile.

        Returns:
            Number of reflections deleted
        """
        with logfire.span(
            "reflection_service.delete_all_for_profile",
            user_id=str(user_id),
            profile_name=str(profile_name),
        ):
            return await self.reflection_repository.delete_by_profile(
                user_id, profile_name
            )
