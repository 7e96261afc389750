"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from fritter.domain.model.profile import Profile
from fritter.domain.value import ProfileId, ProfileName, ProfileRef, UserId


class ProfileRepository(ABC):
    """Repository for Profile entities."""

    @abstractmethod
    async def find_by_name(
        self, user_id: UserId, name: ProfileName
    ) -> Optional[Profile]:
        """Find one of a user's profiles by name (case-insensitive).

        Args:
            user_id: The owner's user ID
            name: Profile name

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """Find every profile."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Profile]:
        """Find all profiles of a user.

        Args:
            user_id: The owner's user ID

        Returns:
            The user's profiles, oldest first
        """
        pass

    @abstractmethod
    async def find_referencing(self, ref: ProfileRef) -> List[Profile]:
        """Find profiles whose follow lists mention the given profile.

        Args:
            ref: Reference to the profile

        Returns:
            Profiles that follow or are followed by it
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def delete(self, profile_id: ProfileId) -> bool:
        """Delete a profile.

        Args:
            profile_id: The profile ID

        Returns:
            True if a profile was deleted, False if none existed
        """
        pass
