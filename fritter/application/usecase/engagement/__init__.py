"""Engagement use cases."""

from .get_engagement import EngagementItem, GetEngagementRequest, GetEngagementUseCase
from .list_engagements import (
    ListEngagementsRequest,
    ListEngagementsResponse,
    ListEngagementsUseCase,
)
from .toggle_vote import ToggleVoteRequest, ToggleVoteResponse, ToggleVoteUseCase

__all__ = [
    "EngagementItem",
    "GetEngagementRequest",
    "GetEngagementUseCase",
    "ListEngagementsRequest",
    "ListEngagementsResponse",
    "ListEngagementsUseCase",
    "ToggleVoteRequest",
    "ToggleVoteResponse",
    "ToggleVoteUseCase",
]
