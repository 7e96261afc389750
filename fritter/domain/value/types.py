"""Domain value objects for Fritter.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from fritter.domain.value.common import RootValueObject, ValueObject
from fritter.domain.value.identifiers import UserId

DEFAULT_PROFILE_NAME = "default"

MAX_FREET_LENGTH = 140


class VoteKind(str, Enum):
    """Kind of vote a user can cast on a freet."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def opposite(self) -> "VoteKind":
        """The vote this one replaces when a voter switches sides."""
        return VoteKind.DISLIKE if self is VoteKind.LIKE else VoteKind.LIKE


class VoterState(str, Enum):
    """Relationship between one voter and one engagement record."""

    NEUTRAL = "neutral"
    LIKED = "liked"
    DISLIKED = "disliked"


class ProfileName(RootValueObject[str]):
    """Name of one of a user's profiles.

    Surrounding whitespace is stripped; 1-50 characters remain.
    """

    @field_validator("root")
    @classmethod
    def validate_profile_name(cls, v: str) -> str:
        """Validate profile name length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Profile name must be 1-50 characters")
        return v

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.root.casefold()


class FreetContent(RootValueObject[str]):
    """Text of a freet: not blank, at most 140 characters."""

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate freet content."""
        if not v.strip():
            raise ValueError("Freet content must be at least one character long")
        if len(v) > MAX_FREET_LENGTH:
            raise ValueError(
                f"Freet content must be no more than {MAX_FREET_LENGTH} characters"
            )
        return v


class ReflectionContent(RootValueObject[str]):
    """Text of a private reflection; same limits as a freet."""

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate reflection content."""
        if not v.strip():
            raise ValueError("Reflection content must be at least one character long")
        if len(v) > MAX_FREET_LENGTH:
            raise ValueError(
                f"Reflection content must be no more than {MAX_FREET_LENGTH} characters"
            )
        return v


class ProfileRef(ValueObject):
    """Reference to a profile owned by some user."""

    user_id: UserId
    name: str

    def matches(self, user_id: UserId, name: ProfileName) -> bool:
        """Whether this reference points at the given profile."""
        return self.user_id == user_id and self.name.casefold() == name.key
