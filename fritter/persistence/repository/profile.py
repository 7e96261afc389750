"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Profile
from fritter.domain.repository import ProfileRepository
from fritter.domain.value import ProfileId, ProfileName, ProfileRef, UserId
from fritter.persistence.mappers import profile_to_dict, row_to_profile
from fritter.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name(
        self, user_id: UserId, name: ProfileName
    ) -> Optional[Profile]:
        """Find one of a user's profiles by name (case-insensitive)."""
        stmt = select(profiles_table).where(
            profiles_table.c.user_id == user_id,
            func.lower(profiles_table.c.name) == name.root.lower(),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_all(self) -> List[Profile]:
        """Find every profile."""
        stmt = select(profiles_table).order_by(profiles_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def find_by_user(self, user_id: UserId) -> List[Profile]:
        """Find all profiles of a user, oldest first."""
        stmt = (
            select(profiles_table)
            .where(profiles_table.c.user_id == user_id)
            .order_by(profiles_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def find_referencing(self, ref: ProfileRef) -> List[Profile]:
        """Find profiles whose follow lists mention the given profile.

        JSONB containment matches the exact stored name; profiles are
        always referenced by their canonical name.
        """
        needle = [ref.model_dump(mode="json")]
        stmt = select(profiles_table).where(
            or_(
                profiles_table.c.following.contains(needle),
                profiles_table.c.followers.contains(needle),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (upsert on ID)."""
        values = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_={
                "following": stmt.excluded.following,
                "followers": stmt.excluded.followers,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return profile

    async def delete(self, profile_id: ProfileId) -> bool:
        """Delete a profile."""
        stmt = delete(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
