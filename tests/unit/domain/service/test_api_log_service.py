"""Unit tests for ApiLogService."""

import pytest

from checkin.domain.repository import ApiLogRepository, UserAgentRepository
from checkin.domain.service import ApiLogService
from checkin.domain.service.api_log_service import UNKNOWN_ROUTE
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ROUTE = "/statuses/{status_id}/tags"


class FailingApiLogRepository(ApiLogRepository):
    """Log store whose writes always fail."""

    async def create(self, method, route, user_agent_id):
        raise RuntimeError("database unavailable")

    async def complete(self, log_id, route, status_code):
        raise RuntimeError("database unavailable")

    async def find_all(self):
        return []


class TestTrack:
    """Tests for the track context manager."""

    @pytest.mark.asyncio
    async def test_records_method_route_and_status(self, unit_env):
        # Arrange
        service = await unit_env.get(ApiLogService)
        log_repo = await unit_env.get(ApiLogRepository)

        # Act
        async with service.track("get", ROUTE, "Mozilla/5.0") as entry:
            entry.status_code = 200

        # Assert
        logs = await log_repo.find_all()
        assert len(logs) == 1
        assert logs[0].method == "GET"
        assert logs[0].route == ROUTE
        assert logs[0].status_code == 200
        assert logs[0].user_agent_id is not None

    @pytest.mark.asyncio
    async def test_exception_recorded_as_500_and_propagated(self, unit_env):
        service = await unit_env.get(ApiLogService)
        log_repo = await unit_env.get(ApiLogRepository)

        with pytest.raises(RuntimeError, match="boom"):
            async with service.track("POST", ROUTE, None):
                raise RuntimeError("boom")

        logs = await log_repo.find_all()
        assert logs[0].status_code == 500

    @pytest.mark.asyncio
    async def test_status_set_before_exception_is_kept(self, unit_env):
        service = await unit_env.get(ApiLogService)
        log_repo = await unit_env.get(ApiLogRepository)

        with pytest.raises(RuntimeError):
            async with service.track("PUT", ROUTE, None) as entry:
                entry.status_code = 403
                raise RuntimeError("late failure")

        logs = await log_repo.find_all()
        assert logs[0].status_code == 403

    @pytest.mark.asyncio
    async def test_unmatched_route_logged_as_unknown(self, unit_env):
        service = await unit_env.get(ApiLogService)
        log_repo = await unit_env.get(ApiLogRepository)

        async with service.track("GET", None, None) as entry:
            entry.status_code = 404

        logs = await log_repo.find_all()
        assert logs[0].route == UNKNOWN_ROUTE

    @pytest.mark.asyncio
    async def test_route_matched_during_request_is_stored(self, unit_env):
        service = await unit_env.get(ApiLogService)
        log_repo = await unit_env.get(ApiLogRepository)

        async with service.track("DELETE", None, None) as entry:
            entry.route = "/statuses/{status_id}/tags/{tag_key}"
            entry.status_code = 200

        logs = await log_repo.find_all()
        assert logs[0].route == "/statuses/{status_id}/tags/{tag_key}"
        assert logs[0].status_code == 200

    @pytest.mark.asyncio
    async def test_repeated_user_agent_stored_once(self, unit_env):
        service = await unit_env.get(ApiLogService)
        log_repo = await unit_env.get(ApiLogRepository)

        for _ in range(2):
            async with service.track("GET", ROUTE, "curl/8.4.0") as entry:
                entry.status_code = 200

        logs = await log_repo.find_all()
        assert logs[0].user_agent_id == logs[1].user_agent_id

    @pytest.mark.asyncio
    async def test_storage_failure_does_not_reach_request(self, unit_env):
        user_agent_repo = await unit_env.get(UserAgentRepository)
        service = ApiLogService(
            api_log_repository=FailingApiLogRepository(),
            user_agent_repository=user_agent_repo,
        )

        async with service.track("GET", ROUTE, None) as entry:
            entry.status_code = 200

        assert entry.entry is None


class TestNormalizeUserAgent:
    """Tests for normalize_user_agent."""

    @pytest.mark.asyncio
    async def test_folds_to_ascii(self, unit_env):
        service = await unit_env.get(ApiLogService)

        assert service.normalize_user_agent("Träwelling/2.0 ☃") == "Trawelling/2.0 "

    @pytest.mark.asyncio
    async def test_truncates_to_column_width(self, unit_env):
        service = await unit_env.get(ApiLogService)

        assert len(service.normalize_user_agent("a" * 400)) == 255

    @pytest.mark.asyncio
    async def test_missing_header_is_empty(self, unit_env):
        service = await unit_env.get(ApiLogService)

        assert service.normalize_user_agent(None) == ""
