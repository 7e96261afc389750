"""Engagement repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from fritter.domain.model.engagement import Engagement
from fritter.domain.value import FreetId


class EngagementRepository(ABC):
    """Repository for Engagement records.

    There is at most one record per freet; implementations enforce this
    with a unique freet ID.
    """

    @abstractmethod
    async def find_by_freet_id(self, freet_id: FreetId) -> Optional[Engagement]:
        """Find the engagement record of a freet.

        Args:
            freet_id: The freet's ID

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_freet_id_for_update(
        self, freet_id: FreetId
    ) -> Optional[Engagement]:
        """Find the engagement record of a freet and lock it for writing.

        The lock is held until the surrounding transaction ends, so other
        writers of the same record wait instead of racing the version check.

        Args:
            freet_id: The freet's ID

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_freet_ids(
        self, freet_ids: Sequence[FreetId]
    ) -> List[Engagement]:
        """Find the engagement records of several freets (batch query).

        Args:
            freet_ids: IDs of the freets

        Returns:
            Records that exist for the given freets, in no particular order
        """
        pass

    @abstractmethod
    async def add_if_absent(self, engagement: Engagement) -> Engagement:
        """Insert a record unless its freet already has one.

        Args:
            engagement: The new record

        Returns:
            The stored record: the given one, or the one that already existed
        """
        pass

    @abstractmethod
    async def save_if_version(
        self, engagement: Engagement, expected_version: int
    ) -> bool:
        """Replace a record only if it is still at the expected version.

        Compare-and-swap used by the vote toggle so concurrent votes never
        overwrite each other.

        Args:
            engagement: The updated record
            expected_version: Version the caller read before updating

        Returns:
            True if written, False if the record changed or no longer exists
        """
        pass

    @abstractmethod
    async def delete_by_freet_id(self, freet_id: FreetId) -> bool:
        """Delete the engagement record of a freet.

        Args:
            freet_id: The freet's ID

        Returns:
            True if a record was deleted, False if none existed
        """
        pass
