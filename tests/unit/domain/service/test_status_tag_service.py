"""Unit tests for StatusTagService."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from checkin.domain.error import (
    DuplicateKeyError,
    NotAuthorizedError,
    NotFoundError,
    UnknownVisibilityError,
)
from checkin.domain.model import Follow
from checkin.domain.repository import (
    FollowRepository,
    StatusRepository,
    StatusTagRepository,
)
from checkin.domain.service import (
    AuthorizationGate,
    StatusService,
    StatusTagService,
    VisibilityPolicy,
)
from checkin.domain.value import StatusId, StatusVisibility
from tests.conftest import make_status, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_status(unit_env, owner, status_id: int = 1):
    status_repo = await unit_env.get(StatusRepository)
    return await status_repo.save(make_status(owner, status_id))


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_owner_creates_tag(self, unit_env):
        # Arrange
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)

        # Act
        tag = await service.create(
            status.id, owner, key="seat", value="12A", visibility="private"
        )

        # Assert
        assert tag.id is not None
        assert tag.key == "seat"
        assert tag.value == "12A"
        assert tag.visibility is StatusVisibility.PRIVATE

    @pytest.mark.asyncio
    async def test_visibility_given_as_integer(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)

        tag = await service.create(status.id, owner, key="seat", value="12A", visibility=2)

        assert tag.visibility is StatusVisibility.FOLLOWERS

    @pytest.mark.asyncio
    async def test_missing_status_raises_not_found(self, unit_env):
        service = await unit_env.get(StatusTagService)

        with pytest.raises(NotFoundError):
            await service.create(
                StatusId(99), make_user(), key="seat", value="12A", visibility="public"
            )

    @pytest.mark.asyncio
    async def test_duplicate_key_on_same_status_rejected(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        with pytest.raises(DuplicateKeyError):
            await service.create(
                status.id, owner, key="seat", value="14C", visibility="public"
            )

        tags = await tag_repo.list_for_status(status.id)
        assert [(t.key, t.value) for t in tags] == [("seat", "12A")]

    @pytest.mark.asyncio
    async def test_same_key_allowed_on_different_statuses(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        first = await _seed_status(unit_env, owner, 1)
        second = await _seed_status(unit_env, owner, 2)

        await service.create(first.id, owner, key="seat", value="12A", visibility="public")
        tag = await service.create(
            second.id, owner, key="seat", value="3F", visibility="public"
        )

        assert tag.status_id == second.id

    @pytest.mark.asyncio
    async def test_non_owner_rejected_and_store_unchanged(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        status = await _seed_status(unit_env, make_user("owner"))

        with pytest.raises(NotAuthorizedError):
            await service.create(
                status.id, make_user("other"), key="seat", value="12A", visibility="public"
            )

        assert await tag_repo.list_for_status(status.id) == []

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        service = await unit_env.get(StatusTagService)
        status = await _seed_status(unit_env, make_user("owner"))

        with pytest.raises(NotAuthorizedError):
            await service.create(status.id, None, key="seat", value="12A", visibility=0)

    @pytest.mark.asyncio
    async def test_duplicate_checked_before_authorization(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        with pytest.raises(DuplicateKeyError):
            await service.create(
                status.id, make_user("other"), key="seat", value="1A", visibility="public"
            )

    @pytest.mark.asyncio
    async def test_unknown_visibility_rejected(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)

        with pytest.raises(UnknownVisibilityError):
            await service.create(
                status.id, owner, key="seat", value="12A", visibility="friends"
            )

        assert await tag_repo.list_for_status(status.id) == []

    @pytest.mark.asyncio
    async def test_unknown_visibility_checked_before_authorization(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        status = await _seed_status(unit_env, make_user("owner"))

        with pytest.raises(UnknownVisibilityError):
            await service.create(
                status.id, make_user("other"), key="seat", value="12A", visibility="bogus"
            )

        assert await tag_repo.list_for_status(status.id) == []

    @pytest.mark.asyncio
    async def test_unknown_visibility_checked_before_status_lookup(self, unit_env):
        service = await unit_env.get(StatusTagService)

        with pytest.raises(UnknownVisibilityError):
            await service.create(
                StatusId(99), make_user(), key="seat", value="12A", visibility="bogus"
            )

    @pytest.mark.asyncio
    async def test_omitted_visibility_uses_configured_default(self, unit_env):
        # Arrange
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        service = StatusTagService(
            status_tag_repository=await unit_env.get(StatusTagRepository),
            status_service=await unit_env.get(StatusService),
            visibility_policy=VisibilityPolicy(
                follow_repository=await unit_env.get(FollowRepository),
                default_visibility=StatusVisibility.PRIVATE,
            ),
            authorization_gate=await unit_env.get(AuthorizationGate),
        )

        # Act
        tag = await service.create(status.id, owner, key="seat", value="12A")

        # Assert
        assert tag.visibility is StatusVisibility.PRIVATE

    @pytest.mark.asyncio
    async def test_omitted_visibility_defaults_to_public(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)

        tag = await service.create(status.id, owner, key="seat", value="12A")

        assert tag.visibility is StatusVisibility.PUBLIC


class TestUpdate:
    """Tests for update method."""

    @pytest.mark.asyncio
    async def test_value_replaced_other_fields_kept(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(
            status.id, owner, key="seat", value="12A", visibility="followers"
        )

        updated = await service.update(status.id, "seat", owner, value="14C")

        assert updated.key == "seat"
        assert updated.value == "14C"
        assert updated.visibility is StatusVisibility.FOLLOWERS

    @pytest.mark.asyncio
    async def test_key_and_visibility_changed(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        await service.update(
            status.id, "seat", owner, value="14C", visibility="private", key="wagon"
        )

        assert await tag_repo.find_by_key(status.id, "seat") is None
        renamed = await tag_repo.find_by_key(status.id, "wagon")
        assert renamed.value == "14C"
        assert renamed.visibility is StatusVisibility.PRIVATE

    @pytest.mark.asyncio
    async def test_rename_to_taken_key_rejected(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")
        await service.create(status.id, owner, key="wagon", value="7", visibility="public")

        with pytest.raises(DuplicateKeyError):
            await service.update(status.id, "seat", owner, value="12A", key="wagon")

    @pytest.mark.asyncio
    async def test_missing_tag_raises_not_found(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)

        with pytest.raises(NotFoundError):
            await service.update(status.id, "seat", owner, value="14C")

    @pytest.mark.asyncio
    async def test_non_owner_rejected_and_value_unchanged(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        with pytest.raises(NotAuthorizedError):
            await service.update(status.id, "seat", make_user("other"), value="1A")

        assert (await tag_repo.find_by_key(status.id, "seat")).value == "12A"

    @pytest.mark.asyncio
    async def test_unknown_visibility_name_rejected(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        with pytest.raises(UnknownVisibilityError):
            await service.update(status.id, "seat", owner, value="14C", visibility="2")

    @pytest.mark.asyncio
    async def test_overlong_value_rejected(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        with pytest.raises(PydanticValidationError):
            await service.update(status.id, "seat", owner, value="x" * 256)


class TestDestroy:
    """Tests for destroy method."""

    @pytest.mark.asyncio
    async def test_owner_deletes_tag(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        await service.destroy(status.id, "seat", owner)

        assert await tag_repo.find_by_key(status.id, "seat") is None

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        service = await unit_env.get(StatusTagService)
        tag_repo = await unit_env.get(StatusTagRepository)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)
        await service.create(status.id, owner, key="seat", value="12A", visibility="public")

        with pytest.raises(NotAuthorizedError):
            await service.destroy(status.id, "seat", make_user("other"))

        assert await tag_repo.find_by_key(status.id, "seat") is not None

    @pytest.mark.asyncio
    async def test_missing_tag_raises_not_found(self, unit_env):
        service = await unit_env.get(StatusTagService)
        owner = make_user("owner")
        status = await _seed_status(unit_env, owner)

        with pytest.raises(NotFoundError):
            await service.destroy(status.id, "seat", owner)


class TestListVisible:
    """Tests for list_visible method."""

    @pytest.mark.asyncio
    async def test_listing_depends_on_viewer(self, unit_env):
        # Arrange - a seat shared with followers and a private booking code
        service = await unit_env.get(StatusTagService)
        follow_repo = await unit_env.get(FollowRepository)
        owner = make_user("owner")
        follower = make_user("follower")
        status = await _seed_status(unit_env, owner)
        await follow_repo.save(Follow(user_id=follower.id, follow_id=owner.id))
        await service.create(status.id, owner, key="train", value="ICE 578", visibility=0)
        await service.create(status.id, owner, key="seat", value="12A", visibility=2)
        await service.create(status.id, owner, key="booking", value="XK3P", visibility=3)

        # Act
        as_owner = await service.list_visible(status.id, owner)
        as_follower = await service.list_visible(status.id, follower)
        as_anonymous = await service.list_visible(status.id, None)

        # Assert
        assert [t.key for t in as_owner] == ["train", "seat", "booking"]
        assert [t.key for t in as_follower] == ["train", "seat"]
        assert [t.key for t in as_anonymous] == ["train"]

    @pytest.mark.asyncio
    async def test_missing_status_raises_not_found(self, unit_env):
        service = await unit_env.get(StatusTagService)

        with pytest.raises(NotFoundError):
            await service.list_visible(StatusId(99), None)
