"""Unit tests for freet use cases."""

from uuid import uuid4

import pytest

from fritter.application.usecase.freet import (
    CreateFreetRequest,
    CreateFreetUseCase,
    DeleteFreetRequest,
    DeleteFreetUseCase,
    GetFreetRequest,
    GetFreetUseCase,
    ListFreetsRequest,
    ListFreetsUseCase,
    UpdateFreetRequest,
    UpdateFreetUseCase,
)
from fritter.domain.error import NotAuthorizedError, NotFoundError
from fritter.domain.service import EngagementService, ProfileService
from fritter.domain.value import FreetId, ProfileName, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateFreetUseCase:
    """Tests for CreateFreetUseCase."""

    @pytest.mark.asyncio
    async def test_default_profile(self, unit_env):
        """Without a profile the freet goes under the default one."""
        use_case = await unit_env.get(CreateFreetUseCase)

        item = await use_case.execute(
            CreateFreetRequest(user_id=str(uuid4()), content="hello")
        )

        assert item.profile_name == "default"
        assert item.content == "hello"

    @pytest.mark.asyncio
    async def test_default_profile_needs_no_setup(self, unit_env):
        """The default profile is implicit for every user."""
        use_case = await unit_env.get(CreateFreetUseCase)

        item = await use_case.execute(
            CreateFreetRequest(
                user_id=str(uuid4()), content="hello", profile_name="Default"
            )
        )

        assert item.profile_name == "default"

    @pytest.mark.asyncio
    async def test_named_profile_must_exist(self, unit_env):
        """Posting under an unknown profile fails."""
        use_case = await unit_env.get(CreateFreetUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateFreetRequest(
                    user_id=str(uuid4()), content="hello", profile_name="ghost"
                )
            )

    @pytest.mark.asyncio
    async def test_named_profile_uses_stored_name(self, unit_env):
        """The profile's own spelling is kept on the freet."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        engagement_service = await unit_env.get(EngagementService)
        use_case = await unit_env.get(CreateFreetUseCase)
        author = UserId(uuid4())
        await profile_service.create_profile(author, ProfileName("Work"))

        # Act
        item = await use_case.execute(
            CreateFreetRequest(user_id=str(author), content="memo", profile_name="work")
        )

        # Assert
        assert item.profile_name == "Work"
        assert await engagement_service.get(FreetId(item.freet_id)) is not None


class TestFreetLifecycleUseCases:
    """Tests for get, list, update and delete."""

    @pytest.mark.asyncio
    async def test_get_and_list(self, unit_env):
        """Created freets can be read back."""
        create = await unit_env.get(CreateFreetUseCase)
        get = await unit_env.get(GetFreetUseCase)
        list_use_case = await unit_env.get(ListFreetsUseCase)
        author = str(uuid4())
        created = await create.execute(CreateFreetRequest(user_id=author, content="a"))

        fetched = await get.execute(GetFreetRequest(freet_id=created.freet_id))
        listed = await list_use_case.execute(ListFreetsRequest(user_id=author))

        assert fetched == created
        assert listed.freets == [created]

    @pytest.mark.asyncio
    async def test_update_by_owner_and_stranger(self, unit_env):
        """Only the author can edit."""
        # Arrange
        create = await unit_env.get(CreateFreetUseCase)
        update = await unit_env.get(UpdateFreetUseCase)
        author = str(uuid4())
        created = await create.execute(CreateFreetRequest(user_id=author, content="v1"))

        # Act
        updated = await update.execute(
            UpdateFreetRequest(freet_id=created.freet_id, user_id=author, content="v2")
        )

        # Assert
        assert updated.content == "v2"
        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateFreetRequest(
                    freet_id=created.freet_id, user_id=str(uuid4()), content="v3"
                )
            )

    @pytest.mark.asyncio
    async def test_delete_checks_owner(self, unit_env):
        """Strangers cannot delete; authors can, taking the record with it."""
        # Arrange
        create = await unit_env.get(CreateFreetUseCase)
        delete = await unit_env.get(DeleteFreetUseCase)
        engagement_service = await unit_env.get(EngagementService)
        author = str(uuid4())
        created = await create.execute(CreateFreetRequest(user_id=author, content="x"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteFreetRequest(freet_id=created.freet_id, user_id=str(uuid4()))
            )

        response = await delete.execute(
            DeleteFreetRequest(freet_id=created.freet_id, user_id=author)
        )
        assert response.message == "Your freet was deleted successfully."
        assert await engagement_service.get(FreetId(created.freet_id)) is None

    @pytest.mark.asyncio
    async def test_delete_missing(self, unit_env):
        """Deleting an unknown freet raises NotFoundError."""
        delete = await unit_env.get(DeleteFreetUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteFreetRequest(freet_id=str(uuid4()), user_id=str(uuid4()))
            )
