"""Engagement entity.

Each freet has exactly one engagement record holding its like/dislike
tallies, the voters behind them, and the derived controversy flag.
"""

from datetime import datetime

from pydantic import Field, model_validator

from fritter.domain.error import InvalidTransitionError
from fritter.domain.model.common import DomainModel
from fritter.domain.value import EngagementId, FreetId, UserId, VoterState


class Engagement(DomainModel):
    """Engagement record for a single freet.

    Invariants (checked on construction):
    - likes == len(liked) and dislikes == len(disliked)
    - nobody is in both liked and disliked

    ``version`` increases by one on every vote so writers can detect
    that the record changed underneath them.
    """

    id: EngagementId
    freet_id: FreetId
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    liked: frozenset[UserId] = frozenset()
    disliked: frozenset[UserId] = frozenset()
    is_controversial: bool = False
    version: int = Field(default=0, ge=0)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_tallies(self) -> "Engagement":
        """Validate that tallies agree with voter sets."""
        if self.likes != len(self.liked):
            raise ValueError("likes must equal the number of voters who liked")
        if self.dislikes != len(self.disliked):
            raise ValueError("dislikes must equal the number of voters who disliked")
        if self.liked & self.disliked:
            raise ValueError("a voter cannot both like and dislike a freet")
        return self

    def voter_state(self, voter_id: UserId) -> VoterState:
        """Current vote of a voter on this freet.

        Raises:
            InvalidTransitionError: If the voter appears in both sets
        """
        in_liked = voter_id in self.liked
        in_disliked = voter_id in self.disliked
        if in_liked and in_disliked:
            raise InvalidTransitionError(str(self.freet_id), str(voter_id))
        if in_liked:
            return VoterState.LIKED
        if in_disliked:
            return VoterState.DISLIKED
        return VoterState.NEUTRAL
