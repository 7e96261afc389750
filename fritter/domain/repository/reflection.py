"""Reflection repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from fritter.domain.model.reflection import Reflection
from fritter.domain.value import ProfileName, ReflectionId, UserId


class ReflectionRepository(ABC):
    """Repository for reflections.

    Listings are ordered by most recently modified first.
    """

    @abstractmethod
    async def find_by_id(self, reflection_id: ReflectionId) -> Optional[Reflection]:
        """Find a reflection by ID."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Reflection]:
        """Find all reflections written by a user."""
        pass

    @abstractmethod
    async def find_by_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> List[Reflection]:
        """Find a user's reflections under one profile (case-insensitive)."""
        pass

    @abstractmethod
    async def save(self, reflection: Reflection) -> Reflection:
        """Save a reflection (create or update)."""
        pass

    @abstractmethod
    async def delete(self, reflection_id: ReflectionId) -> bool:
        """Delete a reflection.

        Returns:
            True if a reflection was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every reflection of a user.

        Returns:
            Number of reflections deleted
        """
        pass

    @abstractmethod
    async def delete_by_profile(self, user_id: UserId, profile_name: ProfileName) -> int:
        """Delete every reflection under one of a user's profiles.

        Returns:
            Number of reflections deleted
        """
        pass
