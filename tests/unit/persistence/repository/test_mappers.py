"""Unit tests for row/domain mappers."""

from datetime import datetime
from uuid import uuid4

from fritter.domain.value import ProfileRef, UserId
from fritter.persistence.mappers import (
    engagement_to_dict,
    profile_to_dict,
    row_to_engagement,
    row_to_profile,
)
from tests.factories import make_engagement


def test_engagement_voters_stored_sorted():
    """Voter sets become sorted arrays and map back to the same record."""
    engagement = make_engagement(likes=3, dislikes=2)

    row = engagement_to_dict(engagement)

    assert row["liked"] == sorted(engagement.liked)
    assert row["disliked"] == sorted(engagement.disliked)
    assert row_to_engagement(row) == engagement


def test_engagement_row_with_string_ids():
    """String UUIDs from the driver are accepted."""
    voter = uuid4()
    row = {
        "id": str(uuid4()),
        "freet_id": str(uuid4()),
        "likes": 1,
        "dislikes": 0,
        "liked": [str(voter)],
        "disliked": None,
        "is_controversial": False,
        "version": 4,
        "updated_at": datetime.now(),
    }

    engagement = row_to_engagement(row)

    assert engagement.liked == frozenset({voter})
    assert engagement.disliked == frozenset()
    assert engagement.version == 4


def test_profile_follow_lists_from_json():
    """JSONB follow lists map to profile references."""
    other = uuid4()
    row = {
        "id": uuid4(),
        "user_id": uuid4(),
        "name": "Main",
        "following": [{"user_id": str(other), "name": "art"}],
        "followers": [],
        "created_at": datetime.now(),
    }

    profile = row_to_profile(row)

    assert profile.following == [ProfileRef(user_id=UserId(other), name="art")]
    assert profile_to_dict(profile)["following"] == [
        {"user_id": str(other), "name": "art"}
    ]
