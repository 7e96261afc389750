"""Unit tests for engagement use cases."""

from uuid import uuid4

import pytest

from fritter.application.usecase.engagement import (
    GetEngagementRequest,
    GetEngagementUseCase,
    ListEngagementsRequest,
    ListEngagementsUseCase,
    ToggleVoteRequest,
    ToggleVoteUseCase,
)
from fritter.domain.error import NotFoundError, ValidationError
from fritter.domain.service import FreetService
from fritter.domain.value import ProfileName, UserId, VoteKind
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestToggleVoteUseCase:
    """Tests for ToggleVoteUseCase."""

    @pytest.mark.asyncio
    async def test_like_returns_tallies(self, unit_env):
        """Liking reports the new tallies and a confirmation message."""
        # Arrange
        freet_service = await unit_env.get(FreetService)
        use_case = await unit_env.get(ToggleVoteUseCase)
        freet = await freet_service.create_freet(UserId(uuid4()), "vote on me")

        # Act
        response = await use_case.execute(
            ToggleVoteRequest(
                freet_id=str(freet.id), user_id=str(uuid4()), kind=VoteKind.LIKE
            )
        )

        # Assert
        assert response.message == "Your freet was liked successfully."
        assert response.freet_id == str(freet.id)
        assert (response.likes, response.dislikes) == (1, 0)
        assert response.is_controversial is False

    @pytest.mark.asyncio
    async def test_switching_sides(self, unit_env):
        """Disliking after liking moves the vote."""
        freet_service = await unit_env.get(FreetService)
        use_case = await unit_env.get(ToggleVoteUseCase)
        freet = await freet_service.create_freet(UserId(uuid4()), "hmm")
        voter = str(uuid4())

        await use_case.execute(
            ToggleVoteRequest(freet_id=str(freet.id), user_id=voter, kind=VoteKind.LIKE)
        )
        response = await use_case.execute(
            ToggleVoteRequest(
                freet_id=str(freet.id), user_id=voter, kind=VoteKind.DISLIKE
            )
        )

        assert response.message == "Your freet was disliked successfully."
        assert (response.likes, response.dislikes) == (0, 1)

    @pytest.mark.asyncio
    async def test_unknown_freet(self, unit_env):
        """Voting on an unknown freet raises NotFoundError."""
        use_case = await unit_env.get(ToggleVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleVoteRequest(
                    freet_id=str(uuid4()), user_id=str(uuid4()), kind=VoteKind.LIKE
                )
            )


class TestReadEngagementUseCases:
    """Tests for GetEngagementUseCase and ListEngagementsUseCase."""

    @pytest.mark.asyncio
    async def test_get_engagement(self, unit_env):
        """The record lists voters by ID."""
        # Arrange
        freet_service = await unit_env.get(FreetService)
        toggle = await unit_env.get(ToggleVoteUseCase)
        get_use_case = await unit_env.get(GetEngagementUseCase)
        freet = await freet_service.create_freet(UserId(uuid4()), "look")
        voter = str(uuid4())
        await toggle.execute(
            ToggleVoteRequest(freet_id=str(freet.id), user_id=voter, kind=VoteKind.LIKE)
        )

        # Act
        item = await get_use_case.execute(GetEngagementRequest(freet_id=str(freet.id)))

        # Assert
        assert item.freet_id == str(freet.id)
        assert item.liked == [voter]
        assert item.disliked == []

    @pytest.mark.asyncio
    async def test_list_filters(self, unit_env):
        """Listings can be narrowed to a user or one of their profiles."""
        # Arrange
        freet_service = await unit_env.get(FreetService)
        use_case = await unit_env.get(ListEngagementsUseCase)
        author = UserId(uuid4())
        work = await freet_service.create_freet(author, "memo", ProfileName("work"))
        home = await freet_service.create_freet(author, "dinner")
        other = await freet_service.create_freet(UserId(uuid4()), "elsewhere")

        # Act
        everything = await use_case.execute(ListEngagementsRequest())
        by_user = await use_case.execute(ListEngagementsRequest(user_id=str(author)))
        by_profile = await use_case.execute(
            ListEngagementsRequest(user_id=str(author), profile_name="WORK")
        )

        # Assert
        assert [e.freet_id for e in everything.engagements] == [
            str(other.id),
            str(home.id),
            str(work.id),
        ]
        assert [e.freet_id for e in by_user.engagements] == [
            str(home.id),
            str(work.id),
        ]
        assert [e.freet_id for e in by_profile.engagements] == [str(work.id)]

    @pytest.mark.asyncio
    async def test_profile_filter_needs_user(self, unit_env):
        """A profile name alone is ambiguous."""
        use_case = await unit_env.get(ListEngagementsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListEngagementsRequest(profile_name="work"))
