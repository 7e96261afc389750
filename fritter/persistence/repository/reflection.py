"""PostgreSQL implementation of Reflection repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Reflection
from fritter.domain.repository import ReflectionRepository
from fritter.domain.value import ProfileName, ReflectionId, UserId
from fritter.persistence.mappers import reflection_to_dict, row_to_reflection
from fritter.persistence.tables import reflections_table


class PostgresReflectionRepository(ReflectionRepository):
    """PostgreSQL implementation of ReflectionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, reflection_id: ReflectionId) -> Optional[Reflection]:
        """Find a reflection by ID."""
        stmt = select(reflections_table).where(reflections_table.c.id == reflection_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reflection(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Reflection]:
        """Find all reflections written by a user."""
        stmt = (
            select(reflections_table)
            .where(reflections_table.c.user_id == user_id)
            .order_by(desc(reflections_table.c.updated_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_reflection(row._asdict()) for row in result.fetchall()]

    async def find_by_profile(
        self, user_id: UserId, profile_name: ProfileName
    ) -> List[Reflection]:
        """Find a user's reflections under one profile (case-insensitive)."""
        stmt = (
            select(reflections_table)
            .where(
                reflections_table.c.user_id == user_id,
                func.lower(reflections_table.c.profile_name) == profile_name.key,
            )
            .order_by(desc(reflections_table.c.updated_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_reflection(row._asdict()) for row in result.fetchall()]

    async def save(self, reflection: Reflection) -> Reflection:
        """Save a reflection (upsert on ID)."""
        with logfire.span(
            "reflection_repository.save", reflection_id=str(reflection.id)
        ):
            stmt = insert(reflections_table).values(**reflection_to_dict(reflection))
            stmt = stmt.on_conflict_do_update(
                index_elements=[reflections_table.c.id],
                set_={
                    "content": stmt.excluded.content,
                    "updated_at": stmt.excluded.updated_at,
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return reflection

    async def delete(self, reflection_id: ReflectionId) -> bool:
        """Delete a reflection."""
        stmt = delete(reflections_table).where(reflections_table.c.id == reflection_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every reflection of a user."""
        stmt = delete(reflections_table).where(reflections_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_profile(self, user_id: UserId, profile_name: ProfileName) -> int:
        """Delete every reflection under one of a user's profiles."""
        stmt = delete(reflections_table).where(
            reflections_table.c.user_id == user_id,
            func.lower(reflections_table.c.profile_name) == profile_name.key,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
