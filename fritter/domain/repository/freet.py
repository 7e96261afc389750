"""Freet repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from fritter.domain.model.freet import Freet
from fritter.domain.value import FreetId, ProfileName, UserId


class FreetRepository(ABC):
    """Repository for Freet aggregate.

    Listings are ordered by most recently modified first.
    """

    @abstractmethod
    async def find_by_id(self, freet_id: FreetId) -> Optional[Freet]:
        """Find a freet by ID.

        Args:
            freet_id: The freet's unique identifier

        Returns:
            The freet if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Freet]:
        """Find every freet, most recently modified first."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Freet]:
        """Find all freets written by a user.

        Args:
            user_id: The owner's user ID

        Returns:
            The user's freets, most recently modified first
        """
        pass

    @abstractmethod
    async def find_by_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> List[Freet]:
        """Find a user's freets posted under one profile.

        Profile names match case-insensitively.

        Args:
            user_id: The owner's user ID
            profile_name: Name of the owner's profile

        Returns:
            Matching freets, most recently modified first
        """
        pass

    @abstractmethod
    async def save(self, freet: Freet) -> Freet:
        """Save a freet (create or update).

        Args:
            freet: The freet to save

        Returns:
            The saved freet
        """
        pass

    @abstractmethod
    async def delete(self, freet_id: FreetId) -> bool:
        """Delete a freet.

        Args:
            freet_id: The freet ID to delete

        Returns:
            True if a freet was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_many(self, freet_ids: Sequence[FreetId]) -> int:
        """Delete several freets at once.

        Args:
            freet_ids: IDs of the freets to delete

        Returns:
            Number of freets deleted
        """
        pass
