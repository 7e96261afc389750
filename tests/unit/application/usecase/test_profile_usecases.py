"""Unit tests for profile and account use cases."""

from uuid import uuid4

import pytest

from fritter.application.usecase.freet import CreateFreetRequest, CreateFreetUseCase
from fritter.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileUseCase,
    DeleteProfileRequest,
    DeleteProfileUseCase,
    FollowProfileUseCase,
    FollowRequest,
    ListProfilesRequest,
    ListProfilesUseCase,
    UnfollowProfileUseCase,
)
from fritter.application.usecase.user import DeleteAccountRequest, DeleteAccountUseCase
from fritter.domain.error import BusinessRuleViolationError
from fritter.domain.service import (
    EngagementService,
    FreetService,
    ProfileService,
    ReflectionService,
)
from fritter.domain.value import ProfileName, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestProfileUseCases:
    """Tests for profile use cases."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, unit_env):
        """Profiles are listed per user."""
        create = await unit_env.get(CreateProfileUseCase)
        list_use_case = await unit_env.get(ListProfilesUseCase)
        owner = str(uuid4())

        created = await create.execute(CreateProfileRequest(user_id=owner, name="news"))
        listed = await list_use_case.execute(ListProfilesRequest(user_id=owner))

        assert created.message == "Your profile was created successfully."
        assert listed.profiles == [created.profile]

    @pytest.mark.asyncio
    async def test_duplicate_rejected(self, unit_env):
        """Names are unique per user."""
        create = await unit_env.get(CreateProfileUseCase)
        owner = str(uuid4())
        await create.execute(CreateProfileRequest(user_id=owner, name="news"))

        with pytest.raises(BusinessRuleViolationError):
            await create.execute(CreateProfileRequest(user_id=owner, name="NEWS"))

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        """Follow adds the reference; unfollow removes it."""
        # Arrange
        create = await unit_env.get(CreateProfileUseCase)
        follow = await unit_env.get(FollowProfileUseCase)
        unfollow = await unit_env.get(UnfollowProfileUseCase)
        alice, bob = str(uuid4()), str(uuid4())
        await create.execute(CreateProfileRequest(user_id=alice, name="main"))
        await create.execute(CreateProfileRequest(user_id=bob, name="art"))
        request = FollowRequest(
            user_id=alice, name="main", other_user_id=bob, other_name="art"
        )

        # Act
        followed = await follow.execute(request)
        unfollowed = await unfollow.execute(request)

        # Assert
        assert followed.message == "The other profile was followed successfully."
        assert [str(ref.user_id) for ref in followed.profile.following] == [bob]
        assert unfollowed.message == "The other profile was unfollowed successfully."
        assert unfollowed.profile.following == []

    @pytest.mark.asyncio
    async def test_delete_profile_reports_what_went(self, unit_env):
        """Deleting a profile reports the freets and reflections that went with it."""
        create_profile = await unit_env.get(CreateProfileUseCase)
        create_freet = await unit_env.get(CreateFreetUseCase)
        delete = await unit_env.get(DeleteProfileUseCase)
        reflection_service = await unit_env.get(ReflectionService)
        owner = str(uuid4())
        await create_profile.execute(CreateProfileRequest(user_id=owner, name="art"))
        for content in ("one", "two"):
            await create_freet.execute(
                CreateFreetRequest(user_id=owner, content=content, profile_name="art")
            )
        await reflection_service.create_reflection(
            UserId(owner), "about art", ProfileName("art")
        )
        kept = await reflection_service.create_reflection(UserId(owner), "general")

        response = await delete.execute(DeleteProfileRequest(user_id=owner, name="art"))

        assert response.deleted_freets == 2
        assert response.deleted_reflections == 1
        assert await reflection_service.list_own(UserId(owner)) == [kept]


class TestDeleteAccountUseCase:
    """Tests for DeleteAccountUseCase."""

    @pytest.mark.asyncio
    async def test_removes_everything_the_user_owns(self, unit_env):
        """Freets, engagement records, reflections and profiles of the user all go."""
        # Arrange
        create_profile = await unit_env.get(CreateProfileUseCase)
        create_freet = await unit_env.get(CreateFreetUseCase)
        use_case = await unit_env.get(DeleteAccountUseCase)
        freet_service = await unit_env.get(FreetService)
        profile_service = await unit_env.get(ProfileService)
        engagement_service = await unit_env.get(EngagementService)
        reflection_service = await unit_env.get(ReflectionService)
        owner = str(uuid4())
        bystander = str(uuid4())
        await create_profile.execute(CreateProfileRequest(user_id=owner, name="art"))
        await create_profile.execute(CreateProfileRequest(user_id=bystander, name="me"))
        await create_freet.execute(
            CreateFreetRequest(user_id=owner, content="a", profile_name="art")
        )
        await create_freet.execute(CreateFreetRequest(user_id=owner, content="b"))
        kept = await create_freet.execute(
            CreateFreetRequest(user_id=bystander, content="c")
        )
        await reflection_service.create_reflection(UserId(owner), "private")
        kept_reflection = await reflection_service.create_reflection(
            UserId(bystander), "also private"
        )

        # Act
        response = await use_case.execute(DeleteAccountRequest(user_id=owner))

        # Assert
        assert (response.deleted_freets, response.deleted_profiles) == (2, 1)
        assert response.deleted_reflections == 1
        assert await reflection_service.list_own(UserId(owner)) == []
        assert await reflection_service.list_own(UserId(bystander)) == [kept_reflection]
        assert await freet_service.list_by_user(UserId(owner)) == []
        assert await profile_service.list_for_user(UserId(owner)) == []
        remaining = await engagement_service.list_all()
        assert [str(e.freet_id) for e in remaining] == [kept.freet_id]
