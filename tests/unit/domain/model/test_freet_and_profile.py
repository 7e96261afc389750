"""Unit tests for Freet, Profile and their value objects."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from fritter.domain.model import Freet, Profile
from fritter.domain.value import (
    FreetId,
    ProfileId,
    ProfileName,
    ProfileRef,
    UserId,
    VoteKind,
)


class TestFreet:
    """Tests for Freet content rules."""

    def test_defaults_to_default_profile(self):
        """Freets without a profile go under 'default'."""
        freet = Freet(id=FreetId(uuid4()), user_id=UserId(uuid4()), content="hi")

        assert freet.profile_name == "default"

    def test_blank_content_rejected(self):
        """Whitespace-only content is not a freet."""
        with pytest.raises(ValidationError, match="at least one character"):
            Freet(id=FreetId(uuid4()), user_id=UserId(uuid4()), content="   ")

    def test_content_length_limit(self):
        """Content is capped at 140 characters."""
        Freet(id=FreetId(uuid4()), user_id=UserId(uuid4()), content="x" * 140)

        with pytest.raises(ValidationError, match="no more than 140"):
            Freet(id=FreetId(uuid4()), user_id=UserId(uuid4()), content="x" * 141)

    def test_is_owned_by(self):
        """Ownership is by user ID."""
        owner = UserId(uuid4())
        freet = Freet(id=FreetId(uuid4()), user_id=owner, content="mine")

        assert freet.is_owned_by(owner)
        assert not freet.is_owned_by(UserId(uuid4()))


class TestProfileName:
    """Tests for ProfileName."""

    def test_strips_whitespace(self):
        """Surrounding whitespace is dropped."""
        assert ProfileName("  work  ").root == "work"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 51])
    def test_invalid_lengths(self, name):
        """Names must be 1-50 characters."""
        with pytest.raises(ValidationError):
            ProfileName(name)

    def test_key_is_case_insensitive(self):
        """Lookup keys ignore case."""
        assert ProfileName("Work").key == ProfileName("wORK").key


class TestProfile:
    """Tests for Profile follow helpers."""

    def test_ref_and_is_following(self):
        """A profile follows a reference regardless of name case."""
        other_user = UserId(uuid4())
        profile = Profile(
            id=ProfileId(uuid4()),
            user_id=UserId(uuid4()),
            name=ProfileName("main"),
            following=[ProfileRef(user_id=other_user, name="Art")],
        )

        assert profile.ref.name == "main"
        assert profile.is_following(ProfileRef(user_id=other_user, name="art"))
        assert not profile.is_following(ProfileRef(user_id=other_user, name="music"))


class TestVoteKind:
    """Tests for VoteKind."""

    def test_opposite(self):
        """Like and dislike are each other's opposite."""
        assert VoteKind.LIKE.opposite is VoteKind.DISLIKE
        assert VoteKind.DISLIKE.opposite is VoteKind.LIKE
