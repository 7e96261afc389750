"""Like/dislike toggle state machine.

A voter is Neutral, Liked or Disliked towards a freet. Casting a vote
of the kind already cast cancels it; casting the other kind moves the
voter across. Likes and dislikes run through the same routine.
"""

from datetime import datetime

from fritter.domain.model.engagement import Engagement
from fritter.domain.value import UserId, VoteKind, VoterState

from .controversy import MIN_LIKES, PERCENT_DIFF, classify

_CAST_STATE = {
    VoteKind.LIKE: VoterState.LIKED,
    VoteKind.DISLIKE: VoterState.DISLIKED,
}


def apply_vote(
    engagement: Engagement,
    voter_id: UserId,
    kind: VoteKind,
    min_likes: int = MIN_LIKES,
    percent_diff: float = PERCENT_DIFF,
) -> Engagement:
    """Apply one vote to an engagement record.

    The record itself is left untouched; a new record is returned with
    tallies matching the voter sets, the controversy flag recomputed and
    the version bumped.

    Args:
        engagement: Record before the vote
        voter_id: Who is voting
        kind: Like or dislike
        min_likes: Controversy like floor
        percent_diff: Controversy closeness fraction

    Returns:
        Record after the vote

    Raises:
        InvalidTransitionError: If the voter's prior state is unrecognized
    """
    state = engagement.voter_state(voter_id)

    voters = {
        VoteKind.LIKE: set(engagement.liked),
        VoteKind.DISLIKE: set(engagement.disliked),
    }

    if state == _CAST_STATE[kind]:
        voters[kind].discard(voter_id)
    else:
        voters[kind.opposite].discard(voter_id)
        voters[kind].add(voter_id)

    likes = len(voters[VoteKind.LIKE])
    dislikes = len(voters[VoteKind.DISLIKE])

    return Engagement(
        id=engagement.id,
        freet_id=engagement.freet_id,
        likes=likes,
        dislikes=dislikes,
        liked=frozenset(voters[VoteKind.LIKE]),
        disliked=frozenset(voters[VoteKind.DISLIKE]),
        is_controversial=classify(likes, dislikes, min_likes, percent_diff),
        version=engagement.version + 1,
        updated_at=datetime.now(),
    )
