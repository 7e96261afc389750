"""Engagement domain service."""

from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from fritter.config import ControversySettings
from fritter.domain.error import (
    CascadeDeletionError,
    ConcurrentUpdateError,
    InvalidTransitionError,
    NotFoundError,
    PersistenceError,
)
from fritter.domain.model.engagement import Engagement
from fritter.domain.model.freet import Freet
from fritter.domain.repository import EngagementRepository, FreetRepository
from fritter.domain.value import EngagementId, FreetId, ProfileName, UserId, VoteKind

from .base import Service
from .vote_toggle import apply_vote


class EngagementService(Service):
    """Domain service for engagement records and voting."""

    def __init__(
        self,
        engagement_repository: EngagementRepository,
        freet_repository: FreetRepository,
        controversy_settings: ControversySettings,
    ) -> None:
        """Initialize engagement service.

        Args:
            engagement_repository: Engagement repository
            freet_repository: Freet repository, used to resolve ownership
            controversy_settings: Classification thresholds and retry limit
        """
        self.engagement_repository = engagement_repository
        self.freet_repository = freet_repository
        self.controversy_settings = controversy_settings

    async def ensure(self, freet_id: FreetId) -> Engagement:
        """Get the engagement record of a freet, creating it if missing.

        Safe to call repeatedly: a freet never gets a second record.

        Args:
            freet_id: Freet ID

        Returns:
            The freet's engagement record
        """
        with logfire.span("engagement_service.ensure", freet_id=str(freet_id)):
            existing = await self.engagement_repository.find_by_freet_id(freet_id)
            if existing:
                return existing

            try:
                stored = await self.engagement_repository.add_if_absent(
                    Engagement(id=EngagementId(uuid4()), freet_id=freet_id)
                )
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to create engagement", freet_id=str(freet_id), error=str(e)
                )
                raise PersistenceError(
                    f"Could not create engagement for freet {freet_id}"
                ) from e

            logfire.info(
                "Engagement ensured", freet_id=str(freet_id), engagement_id=str(stored.id)
            )
            return stored

    async def get(self, freet_id: FreetId) -> Engagement | None:
        """Get the engagement record of a freet without creating one.

        Args:
            freet_id: Freet ID

        Returns:
            The record if found, None otherwise
        """
        with logfire.span("engagement_service.get", freet_id=str(freet_id)):
            return await self.engagement_repository.find_by_freet_id(freet_id)

    async def require(self, freet_id: FreetId) -> Engagement:
        """Get the engagement record of a freet.

        Raises:
            NotFoundError: If the freet has no engagement record
        """
        engagement = await self.get(freet_id)
        if engagement is None:
            logfire.warn("Engagement not found", freet_id=str(freet_id))
            raise NotFoundError("Engagement", str(freet_id))
        return engagement

    async def list_all(self) -> list[Engagement]:
        """List every engagement record, most recently modified freet first."""
        with logfire.span("engagement_service.list_all"):
            freets = await self.freet_repository.find_all()
            return await self._records_for(freets)

    async def list_for_user(self, user_id: UserId) -> list[Engagement]:
        """List engagement records of a user's freets.

        Args:
            user_id: Owner of the freets

        Returns:
            Records ordered by most recently modified freet first
        """
        with logfire.span("engagement_service.list_for_user", user_id=str(user_id)):
            freets = await self.freet_repository.find_by_user(user_id)
            return await self._records_for(freets)

    async def list_for_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> list[Engagement]:
        """List engagement records of the freets posted under one profile.

        Args:
            user_id: Owner of the profile
            profile_name: Profile name

        Returns:
            Records ordered by most recently modified freet first
        """
        with logfire.span(
            "engagement_service.list_for_profile",
            user_id=str(user_id),
            profile_name=str(profile_name),
        ):
            freets = await self.freet_repository.find_by_profile(user_id, profile_name)
            return await self._records_for(freets)

    async def _records_for(self, freets: Sequence[Freet]) -> list[Engagement]:
        """Fetch records for freets, keeping the freets' order."""
        if not freets:
            return []

        records = await self.engagement_repository.find_by_freet_ids(
            [freet.id for freet in freets]
        )
        by_freet = {record.freet_id: record for record in records}
        return [by_freet[freet.id] for freet in freets if freet.id in by_freet]

    async def remove(self, freet_id: FreetId) -> bool:
        """Remove the engagement record of a freet.

        Args:
            freet_id: Freet ID

        Returns:
            True if a record existed and was removed
        """
        with logfire.span("engagement_service.remove", freet_id=str(freet_id)):
            removed = await self.engagement_repository.delete_by_freet_id(freet_id)
            if removed:
                logfire.info("Engagement removed", freet_id=str(freet_id))
            else:
                logfire.info("No engagement to remove", freet_id=str(freet_id))
            return removed

    async def remove_many(self, freet_ids: Sequence[FreetId]) -> list[FreetId]:
        """Remove the engagement records of several freets.

        Every freet is attempted even if an earlier one fails.

        Args:
            freet_ids: Freets whose records should go

        Returns:
            Freet IDs that no longer have a record

        Raises:
            CascadeDeletionError: If any removal failed; lists the failed IDs
        """
        with logfire.span("engagement_service.remove_many", count=len(freet_ids)):
            cleared: list[FreetId] = []
            failed: list[FreetId] = []

            for freet_id in freet_ids:
                try:
                    await self.engagement_repository.delete_by_freet_id(freet_id)
                except Exception as e:
                    logfire.error(
                        "Engagement removal failed",
                        freet_id=str(freet_id),
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    failed.append(freet_id)
                else:
                    cleared.append(freet_id)

            if failed:
                raise CascadeDeletionError(failed)

            logfire.info("Engagements removed", count=len(cleared))
            return cleared

    async def remove_all_for_user(self, user_id: UserId) -> list[FreetId]:
        """Remove the engagement records of every freet a user owns.

        Args:
            user_id: Owner of the freets

        Returns:
            Freet IDs whose records were cleared

        Raises:
            CascadeDeletionError: If any removal failed
        """
        with logfire.span(
            "engagement_service.remove_all_for_user", user_id=str(user_id)
        ):
            freets = await self.freet_repository.find_by_user(user_id)
            return await self.remove_many([freet.id for freet in freets])

    async def remove_all_for_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> list[FreetId]:
        """Remove the engagement records of every freet under one profile.

        Args:
            user_id: Owner of the profile
            profile_name: Profile name

        Returns:
            Freet IDs whose records were cleared

        Raises:
            CascadeDeletionError: If any removal failed
        """
        with logfire.span(
            "engagement_service.remove_all_for_profile",
            user_id=str(user_id),
            profile_name=str(profile_name),
        ):
            freets = await self.freet_repository.find_by_profile(user_id, profile_name)
            return await self.remove_many([freet.id for freet in freets])

    async def like(self, freet_id: FreetId, voter_id: UserId) -> Engagement:
        """Toggle a like on a freet."""
        return await self.toggle_vote(freet_id, voter_id, VoteKind.LIKE)

    async def dislike(self, freet_id: FreetId, voter_id: UserId) -> Engagement:
        """Toggle a dislike on a freet."""
        return await self.toggle_vote(freet_id, voter_id, VoteKind.DISLIKE)

    async def toggle_vote(
        self, freet_id: FreetId, voter_id: UserId, kind: VoteKind
    ) -> Engagement:
        """Cast or cancel a vote on a freet.

        Reads the record under a write lock, applies the toggle and writes
        it back only if nobody changed it in between. The lock makes
        concurrent voters on one freet wait their turn; the version check
        stays as a guard for stores that cannot lock, and on a conflict
        the whole step is redone against the fresh record.

        Args:
            freet_id: Freet ID
            voter_id: Authenticated voter
            kind: Like or dislike

        Returns:
            Updated engagement record

        Raises:
            NotFoundError: If the freet has no engagement record
            InvalidTransitionError: If the voter's prior state is corrupt
            ConcurrentUpdateError: If every attempt lost to a concurrent vote
            PersistenceError: If the store rejects the write
        """
        max_attempts = self.controversy_settings.max_vote_retries

        with logfire.span(
            "engagement_service.toggle_vote",
            freet_id=str(freet_id),
            voter_id=str(voter_id),
            kind=kind.value,
        ):
            for attempt in range(1, max_attempts + 1):
                current = await self.engagement_repository.find_by_freet_id_for_update(
                    freet_id
                )
                if current is None:
                    logfire.warn("Engagement not found", freet_id=str(freet_id))
                    raise NotFoundError("Engagement", str(freet_id))

                try:
                    updated = apply_vote(
                        current,
                        voter_id,
                        kind,
                        min_likes=self.controversy_settings.min_likes,
                        percent_diff=self.controversy_settings.percent_diff,
                    )
                except InvalidTransitionError:
                    logfire.error(
                        "Engagement record in invalid state",
                        freet_id=str(freet_id),
                        voter_id=str(voter_id),
                    )
                    raise

                try:
                    written = await self.engagement_repository.save_if_version(
                        updated, expected_version=current.version
                    )
                except SQLAlchemyError as e:
                    logfire.error(
                        "Vote write failed", freet_id=str(freet_id), error=str(e)
                    )
                    raise PersistenceError(
                        f"Could not record vote on freet {freet_id}"
                    ) from e

                if written:
                    logfire.info(
                        "Vote recorded",
                        freet_id=str(freet_id),
                        voter_id=str(voter_id),
                        kind=kind.value,
                        likes=updated.likes,
                        dislikes=updated.dislikes,
                        is_controversial=updated.is_controversial,
                    )
                    return updated

                logfire.warn(
                    "Engagement changed concurrently, retrying",
                    freet_id=str(freet_id),
                    attempt=attempt,
                )

            raise ConcurrentUpdateError(str(freet_id), max_attempts)
