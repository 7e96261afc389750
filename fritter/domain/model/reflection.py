"""Reflection entity.

Reflections are private notes a user keeps under one of their profiles.
They carry no engagement record and are only shown to their author.
"""

from datetime import datetime

from pydantic import Field, field_validator

from fritter.domain.model.common import DomainModel
from fritter.domain.value import (
    DEFAULT_PROFILE_NAME,
    ReflectionContent,
    ReflectionId,
    UserId,
)


class Reflection(DomainModel):
    """A private reflection."""

    id: ReflectionId
    user_id: UserId
    profile_name: str = DEFAULT_PROFILE_NAME
    content: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return ReflectionContent(v).root

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the given user wrote this reflection."""
        return self.user_id == user_id
