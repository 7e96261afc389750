"""Unit tests for FreetService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from fritter.config import ControversySettings
from fritter.domain.error import (
    CascadeDeletionError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
)
from fritter.domain.repository import EngagementRepository, FreetRepository
from fritter.domain.service import EngagementService, FreetService
from fritter.domain.value import FreetId, ProfileName, UserId
from fritter.persistence.repository.inmemory import (
    InMemoryEngagementRepository,
    InMemoryFreetRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class FailingInsertRepository(InMemoryEngagementRepository):
    """Engagement store that cannot create records."""

    async def add_if_absent(self, engagement):
        raise OperationalError("INSERT", {}, Exception("disk full"))


class FailingDeleteRepository(InMemoryEngagementRepository):
    """Engagement store that cannot delete the records of some freets."""

    def __init__(self) -> None:
        super().__init__()
        self.failing: set[FreetId] = set()

    async def delete_by_freet_id(self, freet_id):
        if freet_id in self.failing:
            raise OperationalError("DELETE", {}, Exception("lock timeout"))
        return await super().delete_by_freet_id(freet_id)


class UndeletableFreetRepository(InMemoryFreetRepository):
    """Freet store whose deletes fail, as in an aborted transaction."""

    async def delete(self, freet_id):
        raise OperationalError("DELETE", {}, Exception("transaction aborted"))

    async def delete_many(self, freet_ids):
        raise OperationalError("DELETE", {}, Exception("transaction aborted"))


def build_services(
    engagement_repository: EngagementRepository,
    freet_repository: FreetRepository | None = None,
) -> tuple[FreetService, FreetRepository]:
    freet_repository = freet_repository or InMemoryFreetRepository()
    engagement_service = EngagementService(
        engagement_repository=engagement_repository,
        freet_repository=freet_repository,
        controversy_settings=ControversySettings(),
    )
    freet_service = FreetService(
        freet_repository=freet_repository, engagement_service=engagement_service
    )
    return freet_service, freet_repository


class TestCreateFreet:
    """Tests for create_freet."""

    @pytest.mark.asyncio
    async def test_creates_freet_with_engagement(self, unit_env):
        """Every new freet comes with an empty engagement record."""
        # Arrange
        freet_service = await unit_env.get(FreetService)
        engagement_service = await unit_env.get(EngagementService)
        author = UserId(uuid4())

        # Act
        freet = await freet_service.create_freet(author, "First freet!")

        # Assert
        assert freet.user_id == author
        assert freet.profile_name == "default"
        assert await freet_service.get_freet(freet.id) == freet
        engagement = await engagement_service.require(freet.id)
        assert (engagement.likes, engagement.dislikes) == (0, 0)

    @pytest.mark.asyncio
    async def test_creates_under_named_profile(self, unit_env):
        """The profile name is kept on the freet."""
        freet_service = await unit_env.get(FreetService)

        freet = await freet_service.create_freet(
            UserId(uuid4()), "At work", ProfileName("Work")
        )

        assert freet.profile_name == "Work"

    @pytest.mark.asyncio
    async def test_engagement_failure_removes_freet(self):
        """A freet whose engagement record cannot be made is not kept."""
        # Arrange
        freet_service, freet_repository = build_services(FailingInsertRepository())
        author = UserId(uuid4())

        # Act & Assert
        with pytest.raises(PersistenceError):
            await freet_service.create_freet(author, "Doomed")

        assert await freet_repository.find_by_user(author) == []

    @pytest.mark.asyncio
    async def test_failed_rollback_keeps_original_error(self):
        """If the freet cannot be removed either, the engagement error still surfaces."""
        # Arrange
        freet_service, _ = build_services(
            FailingInsertRepository(), UndeletableFreetRepository()
        )

        # Act & Assert
        with pytest.raises(PersistenceError):
            await freet_service.create_freet(UserId(uuid4()), "Doomed twice")

    @pytest.mark.asyncio
    async def test_invalid_content_rejected(self, unit_env):
        """Content rules are enforced before anything is stored."""
        freet_service = await unit_env.get(FreetService)
        author = UserId(uuid4())

        with pytest.raises(ValueError):
            await freet_service.create_freet(author, "x" * 141)

        assert await freet_service.list_by_user(author) == []


class TestReadFreets:
    """Tests for get/require/list."""

    @pytest.mark.asyncio
    async def test_require_missing_raises(self, unit_env):
        """Unknown freets raise NotFoundError."""
        freet_service = await unit_env.get(FreetService)

        assert await freet_service.get_freet(FreetId(uuid4())) is None
        with pytest.raises(NotFoundError):
            await freet_service.require_freet(FreetId(uuid4()))

    @pytest.mark.asyncio
    async def test_lists_most_recent_first(self, unit_env):
        """Listings are ordered by last modification."""
        freet_service = await unit_env.get(FreetService)
        author = UserId(uuid4())
        first = await freet_service.create_freet(author, "one")
        second = await freet_service.create_freet(author, "two")

        # Editing the first moves it back to the top
        edited = await freet_service.update_content(first.id, author, "one, edited")

        listed = await freet_service.list_by_user(author)
        assert [f.id for f in listed] == [edited.id, second.id]
        assert [f.id for f in await freet_service.list_freets()] == [
            edited.id,
            second.id,
        ]

    @pytest.mark.asyncio
    async def test_list_by_profile(self, unit_env):
        """Profile listings are case-insensitive and per user."""
        freet_service = await unit_env.get(FreetService)
        author = UserId(uuid4())
        work = await freet_service.create_freet(author, "memo", ProfileName("Work"))
        await freet_service.create_freet(author, "hello")
        await freet_service.create_freet(UserId(uuid4()), "other", ProfileName("work"))

        listed = await freet_service.list_by_profile(author, ProfileName("work"))

        assert [f.id for f in listed] == [work.id]


class TestUpdateContent:
    """Tests for update_content."""

    @pytest.mark.asyncio
    async def test_owner_can_edit(self, unit_env):
        """The author can change the text; updated_at moves forward."""
        # Arrange
        freet_service = await unit_env.get(FreetService)
        author = UserId(uuid4())
        freet = await freet_service.create_freet(author, "draft")

        # Act
        updated = await freet_service.update_content(freet.id, author, "final")

        # Assert
        assert updated.content == "final"
        assert updated.created_at == freet.created_at
        assert updated.updated_at >= freet.updated_at
        assert (await freet_service.require_freet(freet.id)).content == "final"

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        """Other users cannot edit."""
        freet_service = await unit_env.get(FreetService)
        freet = await freet_service.create_freet(UserId(uuid4()), "mine")

        with pytest.raises(NotAuthorizedError):
            await freet_service.update_content(freet.id, UserId(uuid4()), "hijacked")

        assert (await freet_service.require_freet(freet.id)).content == "mine"

    @pytest.mark.asyncio
    async def test_missing_freet(self, unit_env):
        """Editing an unknown freet raises NotFoundError."""
        freet_service = await unit_env.get(FreetService)

        with pytest.raises(NotFoundError):
            await freet_service.update_content(FreetId(uuid4()), UserId(uuid4()), "x")


class TestDeleteFreet:
    """Tests for delete_freet and the cascades."""

    @pytest.mark.asyncio
    async def test_delete_removes_engagement(self, unit_env):
        """Deleting a freet deletes its engagement record too."""
        # Arrange
        freet_service = await unit_env.get(FreetService)
        engagement_service = await unit_env.get(EngagementService)
        freet = await freet_service.create_freet(UserId(uuid4()), "bye")

        # Act
        deleted = await freet_service.delete_freet(freet.id)

        # Assert
        assert deleted is True
        assert await freet_service.get_freet(freet.id) is None
        assert await engagement_service.get(freet.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(self, unit_env):
        """Deleting an unknown freet reports False."""
        freet_service = await unit_env.get(FreetService)

        assert await freet_service.delete_freet(FreetId(uuid4())) is False

    @pytest.mark.asyncio
    async def test_delete_all_for_user(self, unit_env):
        """A user's freets and records go; other users keep theirs."""
        # Arrange
        freet_service = await unit_env.get(FreetService)
        engagement_service = await unit_env.get(EngagementService)
        author = UserId(uuid4())
        mine = [await freet_service.create_freet(author, f"#{i}") for i in range(3)]
        theirs = await freet_service.create_freet(UserId(uuid4()), "stays")

        # Act
        deleted = await freet_service.delete_all_for_user(author)

        # Assert
        assert deleted == 3
        assert await freet_service.list_by_user(author) == []
        for freet in mine:
            assert await engagement_service.get(freet.id) is None
        assert await engagement_service.get(theirs.id) is not None

    @pytest.mark.asyncio
    async def test_delete_all_for_profile(self, unit_env):
        """Only freets under the profile are deleted."""
        freet_service = await unit_env.get(FreetService)
        author = UserId(uuid4())
        await freet_service.create_freet(author, "a", ProfileName("Art"))
        await freet_service.create_freet(author, "b", ProfileName("art"))
        keep = await freet_service.create_freet(author, "c")

        deleted = await freet_service.delete_all_for_profile(author, ProfileName("ART"))

        assert deleted == 2
        assert [f.id for f in await freet_service.list_by_user(author)] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_all_without_freets(self, unit_env):
        """Nothing to delete is not an error."""
        freet_service = await unit_env.get(FreetService)

        assert await freet_service.delete_all_for_user(UserId(uuid4())) == 0

    @pytest.mark.asyncio
    async def test_cascade_failure_keeps_uncleaned_freets(self):
        """Freets whose record could not be removed survive the cascade."""
        # Arrange
        engagement_repository = FailingDeleteRepository()
        freet_service, freet_repository = build_services(engagement_repository)
        author = UserId(uuid4())
        doomed = await freet_service.create_freet(author, "goes")
        stuck = await freet_service.create_freet(author, "stays")
        engagement_repository.failing.add(stuck.id)

        # Act
        with pytest.raises(CascadeDeletionError) as exc_info:
            await freet_service.delete_all_for_user(author)

        # Assert
        assert exc_info.value.failed_ids == [stuck.id]
        assert await freet_repository.find_by_id(doomed.id) is None
        assert await engagement_repository.find_by_freet_id(doomed.id) is None
        assert await freet_repository.find_by_id(stuck.id) is not None
        assert await engagement_repository.find_by_freet_id(stuck.id) is not None

    @pytest.mark.asyncio
    async def test_freet_delete_failure_reports_every_freet(self):
        """When the freets themselves cannot be deleted, all of them are reported."""
        # Arrange
        freet_service, _ = build_services(
            InMemoryEngagementRepository(), UndeletableFreetRepository()
        )
        author = UserId(uuid4())
        first = await freet_service.create_freet(author, "one")
        second = await freet_service.create_freet(author, "two")

        # Act
        with pytest.raises(CascadeDeletionError) as exc_info:
            await freet_service.delete_all_for_user(author)

        # Assert
        assert set(exc_info.value.failed_ids) == {first.id, second.id}
        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_partial_cascade_with_failing_freet_delete(self):
        """A failed cleanup after a partial cascade reports every freet."""
        # Arrange
        engagement_repository = FailingDeleteRepository()
        freet_service, freet_repository = build_services(
            engagement_repository, UndeletableFreetRepository()
        )
        author = UserId(uuid4())
        cleared = await freet_service.create_freet(author, "cleared")
        stuck = await freet_service.create_freet(author, "stuck")
        engagement_repository.failing.add(stuck.id)

        # Act
        with pytest.raises(CascadeDeletionError) as exc_info:
            await freet_service.delete_all_for_user(author)

        # Assert
        assert set(exc_info.value.failed_ids) == {cleared.id, stuck.id}
        assert await freet_repository.find_by_id(cleared.id) is not None
