"""In-memory engagement repository for testing."""

from typing import Optional, Sequence

from fritter.domain.model import Engagement
from fritter.domain.repository import EngagementRepository
from fritter.domain.value import FreetId


class InMemoryEngagementRepository(EngagementRepository):
    """In-memory implementation of EngagementRepository for testing.

    None of the methods await anything, so a locked read followed by a
    versioned write cannot be interleaved with another writer and needs
    no real lock.
    """

    def __init__(self) -> None:
        self._engagements: dict[FreetId, Engagement] = {}

    async def find_by_freet_id(self, freet_id: FreetId) -> Optional[Engagement]:
        """Find the engagement record of a freet."""
        return self._engagements.get(freet_id)

    async def find_by_freet_id_for_update(
        self, freet_id: FreetId
    ) -> Optional[Engagement]:
        return self._engagements.get(freet_id)

    async def find_by_freet_ids(
        self, freet_ids: Sequence[FreetId]
    ) -> list[Engagement]:
        """Find the engagement records of several freets."""
        return [
            self._engagements[freet_id]
            for freet_id in freet_ids
            if freet_id in self._engagements
        ]

    async def add_if_absent(self, engagement: Engagement) -> Engagement:
        """Insert a record unless its freet already has one."""
        return self._engagements.setdefault(engagement.freet_id, engagement)

    async def save_if_version(
        self, engagement: Engagement, expected_version: int
    ) -> bool:
        """Replace a record only if it is still at the expected version."""
        current = self._engagements.get(engagement.freet_id)
        if current is None or current.version != expected_version:
            return False
        self._engagements[engagement.freet_id] = engagement
        return True

    async def delete_by_freet_id(self, freet_id: FreetId) -> bool:
        """Delete the engagement record of a freet."""
        return self._engagements.pop(freet_id, None) is not None
