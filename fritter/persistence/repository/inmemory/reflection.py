"""In-memory reflection repository for testing."""

from typing import Optional

from fritter.domain.model import Reflection
from fritter.domain.repository import ReflectionRepository
from fritter.domain.value import ProfileName, ReflectionId, UserId


class InMemoryReflectionRepository(ReflectionRepository):
    """In-memory implementation of ReflectionRepository for testing."""

    def __init__(self) -> None:
        self._reflections: dict[ReflectionId, Reflection] = {}

    async def find_by_id(self, reflection_id: ReflectionId) -> Optional[Reflection]:
        return self._reflections.get(reflection_id)

    async def find_by_user(self, user_id: UserId) -> list[Reflection]:
        return self._recent_first(
            r for r in self._reflections.values() if r.user_id == user_id
        )

    async def find_by_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> list[Reflection]:
        return self._recent_first(self._in_profile(user_id, profile_name))

    async def save(self, reflection: Reflection) -> Reflection:
        self._reflections[reflection.id] = reflection
        return reflection

    async def delete(self, reflection_id: ReflectionId) -> bool:
        return self._reflections.pop(reflection_id, None) is not None

    async def delete_by_user(self, user_id: UserId) -> int:
        doomed = [r.id for r in self._reflections.values() if r.user_id == user_id]
        for reflection_id in doomed:
            del self._reflections[reflection_id]
        return len(doomed)

    async def delete_by_profile(self, user_id: UserId, profile_name: ProfileName) -> int:
        doomed = [r.id for r in self._in_profile(user_id, profile_name)]
        for reflection_id in doomed:
            del self._reflections[reflection_id]
        return len(doomed)

    def _in_profile(self, user_id: UserId, profile_name: ProfileName) -> list[Reflection]:
        return [
            r
            for r in self._reflections.values()
            if r.user_id == user_id and r.profile_name.casefold() == profile_name.key
        ]

    @staticmethod
    def _recent_first(reflections) -> list[Reflection]:
        return sorted(reflections, key=lambda r: r.updated_at, reverse=True)
