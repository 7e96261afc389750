"""In-memory freet repository for testing."""

from typing import Optional, Sequence

from fritter.domain.model import Freet
from fritter.domain.repository import FreetRepository
from fritter.domain.value import FreetId, ProfileName, UserId


class InMemoryFreetRepository(FreetRepository):
    """In-memory implementation of FreetRepository for testing."""

    def __init__(self) -> None:
        self._freets: dict[FreetId, Freet] = {}

    async def find_by_id(self, freet_id: FreetId) -> Optional[Freet]:
        """Find a freet by ID."""
        return self._freets.get(freet_id)

    async def find_all(self) -> list[Freet]:
        """Find every freet, most recently modified first."""
        return self._recent_first(self._freets.values())

    async def find_by_user(self, user_id: UserId) -> list[Freet]:
        """Find all freets written by a user."""
        return self._recent_first(
            f for f in self._freets.values() if f.user_id == user_id
        )

    async def find_by_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> list[Freet]:
        """Find a user's freets under one profile (case-insensitive)."""
        return self._recent_first(
            f
            for f in self._freets.values()
            if f.user_id == user_id and f.profile_name.casefold() == profile_name.key
        )

    async def save(self, freet: Freet) -> Freet:
        """Save a freet."""
        self._freets[freet.id] = freet
        return freet

    async def delete(self, freet_id: FreetId) -> bool:
        """Delete a freet."""
        return self._freets.pop(freet_id, None) is not None

    async def delete_many(self, freet_ids: Sequence[FreetId]) -> int:
        """Delete several freets at once."""
        return sum(
            1 for freet_id in freet_ids if self._freets.pop(freet_id, None) is not None
        )

    @staticmethod
    def _recent_first(freets) -> list[Freet]:
        return sorted(freets, key=lambda f: f.updated_at, reverse=True)
