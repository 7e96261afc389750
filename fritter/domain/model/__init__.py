"""Domain model entities for Fritter."""

from fritter.domain.model.engagement import Engagement
from fritter.domain.model.freet import Freet
from fritter.domain.model.profile import Profile
from fritter.domain.model.reflection import Reflection

__all__ = [
    "Engagement",
    "Freet",
    "Profile",
    "Reflection",
]
