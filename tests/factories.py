"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from uuid import uuid4

from fritter.domain.model import Engagement, Freet
from fritter.domain.value import EngagementId, FreetId, UserId


def make_freet(
    user_id: UserId | None = None,
    content: str = "Hello, fritter!",
    profile_name: str = "default",
    age_minutes: int = 0,
) -> Freet:
    """Build a freet, optionally back-dated so listings have a stable order."""
    stamp = datetime.now() - timedelta(minutes=age_minutes)
    return Freet(
        id=FreetId(uuid4()),
        user_id=user_id or UserId(uuid4()),
        profile_name=profile_name,
        content=content,
        created_at=stamp,
        updated_at=stamp,
    )


def make_engagement(
    freet_id: FreetId | None = None,
    likes: int = 0,
    dislikes: int = 0,
) -> Engagement:
    """Build an engagement record with anonymous voters behind the tallies."""
    return Engagement(
        id=EngagementId(uuid4()),
        freet_id=freet_id or FreetId(uuid4()),
        likes=likes,
        dislikes=dislikes,
        liked=frozenset(UserId(uuid4()) for _ in range(likes)),
        disliked=frozenset(UserId(uuid4()) for _ in range(dislikes)),
    )
