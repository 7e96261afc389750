"""Profile domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from fritter.domain.error import BusinessRuleViolationError, NotFoundError
from fritter.domain.model.profile import Profile
from fritter.domain.repository import ProfileRepository
from fritter.domain.value import ProfileId, ProfileName, ProfileRef, UserId

from .base import Service
from .freet_service import FreetService


class ProfileService(Service):
    """Domain service for profiles and follow relationships."""

    def __init__(
        self, profile_repository: ProfileRepository, freet_service: FreetService
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            freet_service: Freet domain service, for cascading deletes
        """
        self.profile_repository = profile_repository
        self.freet_service = freet_service

    async def create_profile(self, user_id: UserId, name: ProfileName) -> Profile:
        """Create a new profile for a user.

        Raises:
            BusinessRuleViolationError: If the user already has a profile
                with this name (case-insensitive)
        """
        with logfire.span(
            "profile_service.create_profile", user_id=str(user_id), name=str(name)
        ):
            existing = await self.profile_repository.find_by_name(user_id, name)
            if existing:
                logfire.warn(
                    "Duplicate profile name", user_id=str(user_id), name=str(name)
                )
                raise BusinessRuleViolationError(
                    f"A profile named '{name}' already exists"
                )

            profile = Profile(
                id=ProfileId(uuid4()),
                user_id=user_id,
                name=name,
                created_at=datetime.now(),
            )
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile created", profile_id=str(saved.id), name=str(name))
            return saved

    async def get_profile(self, user_id: UserId, name: ProfileName) -> Profile | None:
        """Get one of a user's profiles by name."""
        with logfire.span(
            "profile_service.get_profile", user_id=str(user_id), name=str(name)
        ):
            return await self.profile_repository.find_by_name(user_id, name)

    async def require_profile(self, user_id: UserId, name: ProfileName) -> Profile:
        """Get one of a user's profiles by name.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.get_profile(user_id, name)
        if profile is None:
            raise NotFoundError("Profile", f"{user_id}/{name}")
        return profile

    async def list_profiles(self) -> list[Profile]:
        """List every profile."""
        with logfire.span("profile_service.list_profiles"):
            return await self.profile_repository.find_all()

    async def list_for_user(self, user_id: UserId) -> list[Profile]:
        """List the profiles of one user."""
        with logfire.span("profile_service.list_for_user", user_id=str(user_id)):
            return await self.profile_repository.find_by_user(user_id)

    async def follow(
        self,
        user_id: UserId,
        name: ProfileName,
        other_user_id: UserId,
        other_name: ProfileName,
    ) -> Profile:
        """Make one profile follow another.

        Both sides are updated: the follower's ``following`` list and the
        followed profile's ``followers`` list.

        Returns:
            The updated follower profile

        Raises:
            NotFoundError: If either profile does not exist
            BusinessRuleViolationError: If already following, or following itself
        """
        with logfire.span(
            "profile_service.follow",
            user_id=str(user_id),
            name=str(name),
            other_user_id=str(other_user_id),
            other_name=str(other_name),
        ):
            profile = await self.require_profile(user_id, name)
            other = await self.require_profile(other_user_id, other_name)

            if profile.id == other.id:
                raise BusinessRuleViolationError("A profile cannot follow itself")
            if profile.is_following(other.ref):
                raise BusinessRuleViolationError("You are already following this profile")

            updated = profile.model_copy(
                update={"following": [*profile.following, other.ref]}
            )
            updated_other = other.model_copy(
                update={"followers": [*other.followers, profile.ref]}
            )
            await self.profile_repository.save(updated_other)
            saved = await self.profile_repository.save(updated)

            logfire.info(
                "Profile followed", follower=str(profile.id), followed=str(other.id)
            )
            return saved

    async def unfollow(
        self,
        user_id: UserId,
        name: ProfileName,
        other_user_id: UserId,
        other_name: ProfileName,
    ) -> Profile:
        """Stop one profile following another.

        Returns:
            The updated follower profile

        Raises:
            NotFoundError: If either profile does not exist
            BusinessRuleViolationError: If not currently following
        """
        with logfire.span(
            "profile_service.unfollow",
            user_id=str(user_id),
            name=str(name),
            other_user_id=str(other_user_id),
            other_name=str(other_name),
        ):
            profile = await self.require_profile(user_id, name)
            other = await self.require_profile(other_user_id, other_name)

            if not profile.is_following(other.ref):
                raise BusinessRuleViolationError("You are not following this profile")

            updated = profile.model_copy(
                update={"following": _without(profile.following, other)}
            )
            updated_other = other.model_copy(
                update={"followers": _without(other.followers, profile)}
            )
            await self.profile_repository.save(updated_other)
            saved = await self.profile_repository.save(updated)

            logfire.info(
                "Profile unfollowed", follower=str(profile.id), followed=str(other.id)
            )
            return saved

    async def delete_profile(self, user_id: UserId, name: ProfileName) -> int:
        """Delete a profile along with every freet posted under it.

        Other profiles stop following it and lose it as a follower.

        Returns:
            Number of freets deleted

        Raises:
            NotFoundError: If the profile does not exist
            CascadeDeletionError: If some freets could not be cleaned up;
                the profile is kept so the deletion can be retried
        """
        with logfire.span(
            "profile_service.delete_profile", user_id=str(user_id), name=str(name)
        ):
            profile = await self.require_profile(user_id, name)
            deleted_freets = await self.freet_service.delete_all_for_profile(
                user_id, name
            )
            await self._remove_profile(profile)
            logfire.info(
                "Profile deleted",
                profile_id=str(profile.id),
                deleted_freets=deleted_freets,
            )
            return deleted_freets

    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Delete every profile of a user.

        Freets are not touched here; account deletion removes them
        separately.

        Returns:
            Number of profiles deleted
        """
        with logfire.span("profile_service.delete_all_for_user", user_id=str(user_id)):
            profiles = await self.profile_repository.find_by_user(user_id)
            for profile in profiles:
                await self._remove_profile(profile)
            return len(profiles)

    async def _remove_profile(self, profile: Profile) -> None:
        """Delete a profile and scrub it from other profiles' follow lists."""
        for related in await self.profile_repository.find_referencing(profile.ref):
            if related.id == profile.id:
                continue
            await self.profile_repository.save(
                related.model_copy(
                    update={
                        "following": _without(related.following, profile),
                        "followers": _without(related.followers, profile),
                    }
                )
            )
        await self.profile_repository.delete(profile.id)


def _without(refs: list[ProfileRef], profile: Profile) -> list[ProfileRef]:
    return [ref for ref in refs if not ref.matches(profile.user_id, profile.name)]
