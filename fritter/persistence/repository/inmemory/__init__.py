"""In-memory repository implementations for testing."""

from fritter.persistence.repository.inmemory.engagement import (
    InMemoryEngagementRepository,
)
from fritter.persistence.repository.inmemory.freet import InMemoryFreetRepository
from fritter.persistence.repository.inmemory.profile import InMemoryProfileRepository
from fritter.persistence.repository.inmemory.reflection import (
    InMemoryReflectionRepository,
)

__all__ = [
    "InMemoryEngagementRepository",
    "InMemoryFreetRepository",
    "InMemoryProfileRepository",
    "InMemoryReflectionRepository",
]
