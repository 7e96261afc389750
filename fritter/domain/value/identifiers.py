"""Strongly typed identifiers for Fritter domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
FreetId = NewType("FreetId", UUID)
EngagementId = NewType("EngagementId", UUID)
ProfileId = NewType("ProfileId", UUID)
ReflectionId = NewType("ReflectionId", UUID)
