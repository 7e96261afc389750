"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from fritter.domain.model import Engagement, Freet, Profile, Reflection
from fritter.domain.value import (
    EngagementId,
    FreetId,
    ProfileId,
    ProfileName,
    ProfileRef,
    ReflectionId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_freet(row: Dict[str, Any]) -> Freet:
    """Convert database row to Freet domain model.

    Args:
        row: Database row as dict

    Returns:
        Freet domain model
    """
    return Freet(
        id=FreetId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        profile_name=row["profile_name"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def freet_to_dict(freet: Freet) -> Dict[str, Any]:
    """Convert Freet domain model to database dict."""
    return freet.model_dump()


def row_to_engagement(row: Dict[str, Any]) -> Engagement:
    """Convert database row to Engagement domain model.

    Args:
        row: Database row as dict

    Returns:
        Engagement domain model
    """
    return Engagement(
        id=EngagementId(_uuid(row["id"])),
        freet_id=FreetId(_uuid(row["freet_id"])),
        likes=row["likes"],
        dislikes=row["dislikes"],
        liked=frozenset(UserId(_uuid(v)) for v in row["liked"] or []),
        disliked=frozenset(UserId(_uuid(v)) for v in row["disliked"] or []),
        is_controversial=row["is_controversial"],
        version=row["version"],
        updated_at=row["updated_at"],
    )


def engagement_to_dict(engagement: Engagement) -> Dict[str, Any]:
    """Convert Engagement domain model to database dict.

    Voter sets are stored as sorted arrays so rows compare stably.
    """
    data = engagement.model_dump()
    data["liked"] = sorted(engagement.liked)
    data["disliked"] = sorted(engagement.disliked)
    return data


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        name=ProfileName(row["name"]),
        following=[ProfileRef.model_validate(ref) for ref in row["following"] or []],
        followers=[ProfileRef.model_validate(ref) for ref in row["followers"] or []],
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Follow lists are dumped in JSON mode for the JSONB columns.
    """
    data = profile.model_dump()
    data["following"] = [ref.model_dump(mode="json") for ref in profile.following]
    data["followers"] = [ref.model_dump(mode="json") for ref in profile.followers]
    return data


def row_to_reflection(row: Dict[str, Any]) -> Reflection:
    """Convert database row to Reflection domain model."""
    return Reflection(
        id=ReflectionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        profile_name=row["profile_name"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reflection_to_dict(reflection: Reflection) -> Dict[str, Any]:
    """Convert Reflection domain model to database dict."""
    return reflection.model_dump()
