"""Unit tests for the Engagement model."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from fritter.domain.model import Engagement
from fritter.domain.value import EngagementId, FreetId, UserId, VoterState


class TestEngagementInvariants:
    """Tests for tally/voter-set consistency."""

    def test_new_record_is_empty(self):
        """A fresh record has no votes and is not controversial."""
        engagement = Engagement(id=EngagementId(uuid4()), freet_id=FreetId(uuid4()))

        assert engagement.likes == 0
        assert engagement.dislikes == 0
        assert engagement.liked == frozenset()
        assert engagement.disliked == frozenset()
        assert engagement.is_controversial is False
        assert engagement.version == 0

    def test_likes_must_match_liked_set(self):
        """A like count without matching voters is rejected."""
        with pytest.raises(ValidationError, match="likes must equal"):
            Engagement(id=EngagementId(uuid4()), freet_id=FreetId(uuid4()), likes=1)

    def test_dislikes_must_match_disliked_set(self):
        """A dislike count without matching voters is rejected."""
        with pytest.raises(ValidationError, match="dislikes must equal"):
            Engagement(
                id=EngagementId(uuid4()),
                freet_id=FreetId(uuid4()),
                dislikes=2,
                disliked=frozenset({UserId(uuid4())}),
            )

    def test_voter_cannot_be_in_both_sets(self):
        """Liked and disliked must be disjoint."""
        voter = UserId(uuid4())

        with pytest.raises(ValidationError, match="both like and dislike"):
            Engagement(
                id=EngagementId(uuid4()),
                freet_id=FreetId(uuid4()),
                likes=1,
                dislikes=1,
                liked=frozenset({voter}),
                disliked=frozenset({voter}),
            )

    def test_negative_counts_rejected(self):
        """Tallies are never negative."""
        with pytest.raises(ValidationError):
            Engagement(id=EngagementId(uuid4()), freet_id=FreetId(uuid4()), likes=-1)

    def test_record_is_frozen(self):
        """Records cannot be mutated in place."""
        engagement = Engagement(id=EngagementId(uuid4()), freet_id=FreetId(uuid4()))

        with pytest.raises(ValidationError):
            engagement.likes = 5


class TestVoterState:
    """Tests for voter_state."""

    def test_states(self):
        """Each voter's state reflects the set they are in."""
        fan, critic, bystander = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        engagement = Engagement(
            id=EngagementId(uuid4()),
            freet_id=FreetId(uuid4()),
            likes=1,
            dislikes=1,
            liked=frozenset({fan}),
            disliked=frozenset({critic}),
        )

        assert engagement.voter_state(fan) == VoterState.LIKED
        assert engagement.voter_state(critic) == VoterState.DISLIKED
        assert engagement.voter_state(bystander) == VoterState.NEUTRAL
