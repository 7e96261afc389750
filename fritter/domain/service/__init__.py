"""Domain services."""

from .base import Service
from .controversy import MIN_LIKES, PERCENT_DIFF, classify
from .engagement_service import EngagementService
from .freet_service import FreetService
from .jwt_service import JWTService
from .profile_service import ProfileService
from .reflection_service import ReflectionService
from .vote_toggle import apply_vote

__all__ = [
    "EngagementService",
    "FreetService",
    "JWTService",
    "MIN_LIKES",
    "PERCENT_DIFF",
    "ProfileService",
    "ReflectionService",
    "Service",
    "apply_vote",
    "classify",
]
