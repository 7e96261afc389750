"""Repository interfaces for Fritter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from fritter.domain.repository.engagement import EngagementRepository
from fritter.domain.repository.freet import FreetRepository
from fritter.domain.repository.profile import ProfileRepository
from fritter.domain.repository.reflection import ReflectionRepository

__all__ = [
    "EngagementRepository",
    "FreetRepository",
    "ProfileRepository",
    "ReflectionRepository",
]
