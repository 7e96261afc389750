"""PostgreSQL repository implementations."""

from fritter.persistence.repository.engagement import PostgresEngagementRepository
from fritter.persistence.repository.freet import PostgresFreetRepository
from fritter.persistence.repository.profile import PostgresProfileRepository
from fritter.persistence.repository.reflection import PostgresReflectionRepository

__all__ = [
    "PostgresEngagementRepository",
    "PostgresFreetRepository",
    "PostgresProfileRepository",
    "PostgresReflectionRepository",
]
