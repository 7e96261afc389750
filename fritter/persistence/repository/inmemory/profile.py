"""In-memory profile repository for testing."""

from typing import Optional

from fritter.domain.model import Profile
from fritter.domain.repository import ProfileRepository
from fritter.domain.value import ProfileId, ProfileName, ProfileRef, UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    async def find_by_name(
        self, user_id: UserId, name: ProfileName
    ) -> Optional[Profile]:
        """Find one of a user's profiles by name (case-insensitive)."""
        for profile in self._profiles.values():
            if profile.user_id == user_id and profile.name.key == name.key:
                return profile
        return None

    async def find_all(self) -> list[Profile]:
        """Find every profile."""
        return sorted(self._profiles.values(), key=lambda p: p.created_at)

    async def find_by_user(self, user_id: UserId) -> list[Profile]:
        """Find all profiles of a user, oldest first."""
        return sorted(
            (p for p in self._profiles.values() if p.user_id == user_id),
            key=lambda p: p.created_at,
        )

    async def find_referencing(self, ref: ProfileRef) -> list[Profile]:
        """Find profiles whose follow lists mention the given profile."""
        name = ProfileName(ref.name)
        return [
            p
            for p in self._profiles.values()
            if any(r.matches(ref.user_id, name) for r in [*p.following, *p.followers])
        ]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile."""
        self._profiles[profile.id] = profile
        return profile

    async def delete(self, profile_id: ProfileId) -> bool:
        """Delete a profile."""
        return self._profiles.pop(profile_id, None) is not None
