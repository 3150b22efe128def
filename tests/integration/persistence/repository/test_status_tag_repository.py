"""Integration tests for PostgresStatusTagRepository.

These tests verify the unique key constraint and row mapping against the
database.
"""

import random

import pytest

from checkin.domain.error import DuplicateKeyError
from checkin.domain.repository import (
    StatusRepository,
    StatusTagRepository,
    UserRepository,
)
from checkin.domain.value import StatusVisibility
from tests.conftest import make_status, make_tag, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


async def _seed_status(integration_env):
    user_repo = await integration_env.get(UserRepository)
    status_repo = await integration_env.get(StatusRepository)
    owner = make_user(f"owner-{random.randrange(10**9)}")
    await user_repo.save(owner)
    return await status_repo.save(make_status(owner, random.randrange(10**12)))


class TestStatusTagRepositoryIntegration:
    """Integration tests for PostgresStatusTagRepository."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_keeps_visibility(self, integration_env):
        tag_repo = await integration_env.get(StatusTagRepository)
        status = await _seed_status(integration_env)

        tag = await tag_repo.create(
            make_tag(status, visibility=StatusVisibility.FOLLOWERS)
        )

        assert tag.id is not None
        found = await tag_repo.find_by_key(status.id, "seat")
        assert found.visibility is StatusVisibility.FOLLOWERS

    @pytest.mark.asyncio
    async def test_duplicate_key_maps_to_domain_error(self, integration_env):
        tag_repo = await integration_env.get(StatusTagRepository)
        status = await _seed_status(integration_env)
        await tag_repo.create(make_tag(status))

        with pytest.raises(DuplicateKeyError):
            await tag_repo.create(make_tag(status, value="14C"))

        # Savepoint rollback leaves the session usable
        tags = await tag_repo.list_for_status(status.id)
        assert [t.value for t in tags] == ["12A"]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, integration_env):
        tag_repo = await integration_env.get(StatusTagRepository)
        status = await _seed_status(integration_env)
        tag = await tag_repo.create(make_tag(status))

        updated = await tag_repo.update(tag, value="14C", key="wagon")
        assert (updated.key, updated.value) == ("wagon", "14C")

        await tag_repo.delete(updated)
        assert await tag_repo.list_for_status(status.id) == []
