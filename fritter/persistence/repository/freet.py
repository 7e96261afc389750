"""PostgreSQL implementation of Freet repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Freet
from fritter.domain.repository import FreetRepository
from fritter.domain.value import FreetId, ProfileName, UserId
from fritter.persistence.mappers import freet_to_dict, row_to_freet
from fritter.persistence.tables import freets_table


class PostgresFreetRepository(FreetRepository):
    """PostgreSQL implementation of FreetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, freet_id: FreetId) -> Optional[Freet]:
        """Find a freet by ID."""
        with logfire.span("freet_repository.find_by_id", freet_id=str(freet_id)):
            stmt = select(freets_table).where(freets_table.c.id == freet_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_freet(row._asdict()) if row else None

    async def find_all(self) -> List[Freet]:
        """Find every freet, most recently modified first."""
        stmt = select(freets_table).order_by(desc(freets_table.c.updated_at))
        result = await self.session.execute(stmt)
        return [row_to_freet(row._asdict()) for row in result.fetchall()]

    async def find_by_user(self, user_id: UserId) -> List[Freet]:
        """Find all freets written by a user."""
        stmt = (
            select(freets_table)
            .where(freets_table.c.user_id == user_id)
            .order_by(desc(freets_table.c.updated_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_freet(row._asdict()) for row in result.fetchall()]

    async def find_by_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> List[Freet]:
        """Find a user's freets under one profile (case-insensitive)."""
        stmt = (
            select(freets_table)
            .where(
                freets_table.c.user_id == user_id,
                func.lower(freets_table.c.profile_name) == profile_name.root.lower(),
            )
            .order_by(desc(freets_table.c.updated_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_freet(row._asdict()) for row in result.fetchall()]

    async def save(self, freet: Freet) -> Freet:
        """Save a freet (upsert on ID)."""
        with logfire.span("freet_repository.save", freet_id=str(freet.id)):
            values = freet_to_dict(freet)
            stmt = insert(freets_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[freets_table.c.id],
                set_={
                    "profile_name": stmt.excluded.profile_name,
                    "content": stmt.excluded.content,
                    "updated_at": stmt.excluded.updated_at,
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return freet

    async def delete(self, freet_id: FreetId) -> bool:
        """Delete a freet."""
        stmt = delete(freets_table).where(freets_table.c.id == freet_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_many(self, freet_ids: Sequence[FreetId]) -> int:
        """Delete several freets at once."""
        if not freet_ids:
            return 0

        stmt = delete(freets_table).where(freets_table.c.id.in_(freet_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
