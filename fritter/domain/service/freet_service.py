"""Freet domain service.

Owns the freet lifecycle and keeps every freet paired with exactly one
engagement record: the record is created together with the freet and
removed before the freet is.
"""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from fritter.domain.error import CascadeDeletionError, NotAuthorizedError, NotFoundError
from fritter.domain.model.freet import Freet
from fritter.domain.repository import FreetRepository
from fritter.domain.value import DEFAULT_PROFILE_NAME, FreetId, ProfileName, UserId

from .base import Service
from .engagement_service import EngagementService


class FreetService(Service):
    """Domain service for freet operations."""

    def __init__(
        self,
        freet_repository: FreetRepository,
        engagement_service: EngagementService,
    ) -> None:
        """Initialize freet service.

        Args:
            freet_repository: Freet repository
            engagement_service: Engagement domain service
        """
        self.freet_repository = freet_repository
        self.engagement_service = engagement_service

    async def create_freet(
        self,
        user_id: UserId,
        content: str,
        profile_name: ProfileName | None = None,
    ) -> Freet:
        """Create a freet together with its engagement record.

        If the engagement record cannot be created the freet is removed
        again, so callers never see a freet without one.

        Args:
            user_id: Author
            content: Freet text
            profile_name: Profile to post under (default profile if None)

        Returns:
            Created freet
        """
        name = profile_name.root if profile_name else DEFAULT_PROFILE_NAME

        with logfire.span(
            "freet_service.create_freet", user_id=str(user_id), profile_name=name
        ):
            now = datetime.now()
            freet = Freet(
                id=FreetId(uuid4()),
                user_id=user_id,
                profile_name=name,
                content=content,
                created_at=now,
                updated_at=now,
            )

            saved = await self.freet_repository.save(freet)

            try:
                await self.engagement_service.ensure(saved.id)
            except Exception:
                logfire.error(
                    "Engagement creation failed, rolling back freet",
                    freet_id=str(saved.id),
                )
                try:
                    await self.freet_repository.delete(saved.id)
                except SQLAlchemyError as cleanup_error:
                    logfire.error(
                        "Could not remove freet after engagement failure",
                        freet_id=str(saved.id),
                        error=str(cleanup_error),
                    )
                raise

            logfire.info("Freet created", freet_id=str(saved.id), user_id=str(user_id))
            return saved

    async def get_freet(self, freet_id: FreetId) -> Freet | None:
        """Get a freet by ID.

        Args:
            freet_id: Freet ID

        Returns:
            Freet if found, None otherwise
        """
        with logfire.span("freet_service.get_freet", freet_id=str(freet_id)):
            freet = await self.freet_repository.find_by_id(freet_id)

            if freet is None:
                logfire.warn("Freet not found", freet_id=str(freet_id))

            return freet

    async def require_freet(self, freet_id: FreetId) -> Freet:
        """Get a freet by ID.

        Raises:
            NotFoundError: If the freet does not exist
        """
        freet = await self.get_freet(freet_id)
        if freet is None:
            raise NotFoundError("Freet", str(freet_id))
        return freet

    async def list_freets(self) -> list[Freet]:
        """List all freets, most recently modified first."""
        with logfire.span("freet_service.list_freets"):
            return await self.freet_repository.find_all()

    async def list_by_user(self, user_id: UserId) -> list[Freet]:
        """List a user's freets, most recently modified first."""
        with logfire.span("freet_service.list_by_user", user_id=str(user_id)):
            return await self.freet_repository.find_by_user(user_id)

    async def list_by_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> list[Freet]:
        """List the freets under one of a user's profiles."""
        with logfire.span(
            "freet_service.list_by_profile",
            user_id=str(user_id),
            profile_name=str(profile_name),
        ):
            return await self.freet_repository.find_by_profile(user_id, profile_name)

    async def update_content(
        self, freet_id: FreetId, user_id: UserId, content: str
    ) -> Freet:
        """Replace the text of a freet.

        Args:
            freet_id: Freet ID
            user_id: User requesting the change
            content: New text

        Returns:
            Updated freet

        Raises:
            NotFoundError: If the freet does not exist
            NotAuthorizedError: If the user does not own the freet
        """
        with logfire.span(
            "freet_service.update_content",
            freet_id=str(freet_id),
            user_id=str(user_id),
            content_length=len(content),
        ):
            freet = await self.require_freet(freet_id)
            if not freet.is_owned_by(user_id):
                logfire.warn(
                    "Unauthorized freet edit", freet_id=str(freet_id), user_id=str(user_id)
                )
                raise NotAuthorizedError("freet", str(freet_id), str(user_id))

            updated = Freet(
                id=freet.id,
                user_id=freet.user_id,
                profile_name=freet.profile_name,
                content=content,
                created_at=freet.created_at,
                updated_at=datetime.now(),
            )
            saved = await self.freet_repository.save(updated)
            logfire.info("Freet content updated", freet_id=str(freet_id))
            return saved

    async def delete_freet(self, freet_id: FreetId) -> bool:
        """Delete a freet and its engagement record.

        Args:
            freet_id: Freet ID

        Returns:
            True if the freet existed
        """
        with logfire.span("freet_service.delete_freet", freet_id=str(freet_id)):
            await self.engagement_service.remove(freet_id)
            deleted = await self.freet_repository.delete(freet_id)
            logfire.info("Freet deleted", freet_id=str(freet_id), existed=deleted)
            return deleted

    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Delete every freet of a user, engagement records first.

        Args:
            user_id: Owner of the freets

        Returns:
            Number of freets deleted

        Raises:
            CascadeDeletionError: If some engagement records could not be
                removed; those freets are kept so the cascade can be retried
        """
        with logfire.span("freet_service.delete_all_for_user", user_id=str(user_id)):
            freets = await self.freet_repository.find_by_user(user_id)
            return await self._cascade_delete([freet.id for freet in freets])

    async def delete_all_for_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> int:
        """Delete every freet under one profile, engagement records first.

        Args:
            user_id: Owner of the profile
            profile_name: Profile name

        Returns:
            Number of freets deleted

        Raises:
            CascadeDeletionError: If some engagement records could not be
                removed; those freets are kept so the cascade can be retried
        """
        with logfire.span(
            "freet_service.delete_all_for_profile",
            user_id=str(user_id),
            profile_name=str(profile_name),
        ):
            freets = await self.freet_repository.find_by_profile(user_id, profile_name)
            return await self._cascade_delete([freet.id for freet in freets])

    async def _cascade_delete(self, freet_ids: Sequence[FreetId]) -> int:
        """Remove engagement records, then the freets whose records are gone."""
        if not freet_ids:
            return 0

        try:
            await self.engagement_service.remove_many(freet_ids)
        except CascadeDeletionError as e:
            failed = set(e.failed_ids)
            cleared = [freet_id for freet_id in freet_ids if freet_id not in failed]
            try:
                await self.freet_repository.delete_many(cleared)
            except SQLAlchemyError as cleanup_error:
                logfire.error(
                    "Could not delete freets after partial cascade",
                    count=len(cleared),
                    error=str(cleanup_error),
                )
                raise CascadeDeletionError(list(freet_ids)) from cleanup_error
            logfire.warn(
                "Cascade left freets behind",
                deleted=len(cleared),
                failed=[str(freet_id) for freet_id in e.failed_ids],
            )
            raise

        try:
            deleted = await self.freet_repository.delete_many(freet_ids)
        except SQLAlchemyError as e:
            logfire.error(
                "Could not delete freets in cascade", count=len(freet_ids), error=str(e)
            )
            raise CascadeDeletionError(list(freet_ids)) from e
        logfire.info("Freets deleted in cascade", count=deleted)
        return deleted
