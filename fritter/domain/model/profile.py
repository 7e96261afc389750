"""Profile entity.

A user can publish under several named profiles, and each profile keeps
its own follow relationships.
"""

from datetime import datetime

from pydantic import Field

from fritter.domain.model.common import DomainModel
from fritter.domain.value import ProfileId, ProfileName, ProfileRef, UserId


class Profile(DomainModel):
    """Named profile of a user."""

    id: ProfileId
    user_id: UserId
    name: ProfileName
    following: list[ProfileRef] = Field(default_factory=list)
    followers: list[ProfileRef] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> ProfileRef:
        """Reference other profiles use to point at this one."""
        return ProfileRef(user_id=self.user_id, name=self.name.root)

    def is_following(self, other: ProfileRef) -> bool:
        """Whether this profile follows the referenced profile."""
        return any(
            ref.matches(other.user_id, ProfileName(other.name))
            for ref in self.following
        )
