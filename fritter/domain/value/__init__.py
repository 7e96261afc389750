"""Domain value objects for Fritter."""

from fritter.domain.value.identifiers import (
    EngagementId,
    FreetId,
    ProfileId,
    ReflectionId,
    UserId,
)
from fritter.domain.value.types import (
    DEFAULT_PROFILE_NAME,
    MAX_FREET_LENGTH,
    FreetContent,
    ProfileName,
    ProfileRef,
    ReflectionContent,
    VoteKind,
    VoterState,
)

__all__ = [
    # Identifiers
    "UserId",
    "FreetId",
    "EngagementId",
    "ProfileId",
    "ReflectionId",
    # Types
    "DEFAULT_PROFILE_NAME",
    "MAX_FREET_LENGTH",
    "FreetContent",
    "ProfileName",
    "ProfileRef",
    "ReflectionContent",
    "VoteKind",
    "VoterState",
]
