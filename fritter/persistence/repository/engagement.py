"""PostgreSQL implementation of Engagement repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Engagement
from fritter.domain.repository import EngagementRepository
from fritter.domain.value import FreetId
from fritter.persistence.mappers import engagement_to_dict, row_to_engagement
from fritter.persistence.tables import engagements_table


class PostgresEngagementRepository(EngagementRepository):
    """PostgreSQL implementation of EngagementRepository.

    Every write runs inside a SAVEPOINT. A failed statement only rolls
    back its own savepoint, so the request transaction stays usable for
    the statements that follow (compensating deletes, the rest of a
    cascade).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_freet_id(self, freet_id: FreetId) -> Optional[Engagement]:
        """Find the engagement record of a freet."""
        stmt = select(engagements_table).where(
            engagements_table.c.freet_id == freet_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_engagement(row._asdict()) if row else None

    async def find_by_freet_id_for_update(
        self, freet_id: FreetId
    ) -> Optional[Engagement]:
        """Find the engagement record of a freet with SELECT ... FOR UPDATE."""
        stmt = (
            select(engagements_table)
            .where(engagements_table.c.freet_id == freet_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_engagement(row._asdict()) if row else None

    async def find_by_freet_ids(
        self, freet_ids: Sequence[FreetId]
    ) -> List[Engagement]:
        """Find the engagement records of several freets (batch query)."""
        if not freet_ids:
            return []

        stmt = select(engagements_table).where(
            engagements_table.c.freet_id.in_(freet_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_engagement(row._asdict()) for row in result.fetchall()]

    async def add_if_absent(self, engagement: Engagement) -> Engagement:
        """Insert a record unless its freet already has one.

        Relies on the unique freet_id constraint, so two concurrent
        requests still end up with a single row.
        """
        with logfire.span(
            "engagement_repository.add_if_absent", freet_id=str(engagement.freet_id)
        ):
            stmt = (
                insert(engagements_table)
                .values(**engagement_to_dict(engagement))
                .on_conflict_do_nothing(index_elements=[engagements_table.c.freet_id])
            )
            async with self.session.begin_nested():
                await self.session.execute(stmt)

            stored = await self.find_by_freet_id(engagement.freet_id)
            return stored if stored is not None else engagement

    async def save_if_version(
        self, engagement: Engagement, expected_version: int
    ) -> bool:
        """Replace a record only if it is still at the expected version."""
        with logfire.span(
            "engagement_repository.save_if_version",
            freet_id=str(engagement.freet_id),
            expected_version=expected_version,
        ):
            values = engagement_to_dict(engagement)
            stmt = (
                update(engagements_table)
                .where(
                    and_(
                        engagements_table.c.id == engagement.id,
                        engagements_table.c.version == expected_version,
                    )
                )
                .values(
                    likes=values["likes"],
                    dislikes=values["dislikes"],
                    liked=values["liked"],
                    disliked=values["disliked"],
                    is_controversial=values["is_controversial"],
                    version=values["version"],
                    updated_at=values["updated_at"],
                )
            )
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
            return result.rowcount == 1  # type: ignore[attr-defined]

    async def delete_by_freet_id(self, freet_id: FreetId) -> bool:
        """Delete the engagement record of a freet."""
        stmt = delete(engagements_table).where(
            engagements_table.c.freet_id == freet_id
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
