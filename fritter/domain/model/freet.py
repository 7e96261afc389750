"""Freet aggregate root.

Freets are the short posts users publish, each under one of their
profiles.
"""

from datetime import datetime

from pydantic import Field, field_validator

from fritter.domain.model.common import DomainModel
from fritter.domain.value import DEFAULT_PROFILE_NAME, FreetContent, FreetId, UserId


class Freet(DomainModel):
    """Freet aggregate root.

    Business rules:
    - Content is not blank and at most 140 characters
    - Only the owner changes content; every change refreshes updated_at
    - Profile association is by name, scoped to the owning user
    """

    id: FreetId
    user_id: UserId
    profile_name: str = DEFAULT_PROFILE_NAME
    content: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate freet content rules."""
        return FreetContent(v).root

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the given user wrote this freet."""
        return self.user_id == user_id
