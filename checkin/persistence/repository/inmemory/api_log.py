"""In-memory implementation of the API log repositories for testing."""

from copy import deepcopy
from itertools import count

from checkin.domain.model import ApiLog, UserAgent
from checkin.domain.repository import ApiLogRepository, UserAgentRepository
from checkin.domain.value import ApiLogId, UserAgentId


class InMemoryUserAgentRepository(UserAgentRepository):
    """In-memory implementation of UserAgentRepository for testing."""

    def __init__(self) -> None:
        self._agents: dict[str, UserAgent] = {}
        self._ids = count(1)

    async def first_or_create(self, user_agent: str) -> UserAgent:
        """Return the stored user agent, inserting it when unknown."""
        if user_agent not in self._agents:
            self._agents[user_agent] = UserAgent(
                id=UserAgentId(next(self._ids)), user_agent=user_agent
            )
        return deepcopy(self._agents[user_agent])


class InMemoryApiLogRepository(ApiLogRepository):
    """In-memory implementation of ApiLogRepository for testing."""

    def __init__(self) -> None:
        self._logs: dict[ApiLogId, ApiLog] = {}
        self._ids = count(1)

    async def create(
        self, method: str, route: str, user_agent_id: UserAgentId | None
    ) -> ApiLog:
        """Insert a log entry for an incoming request."""
        entry = ApiLog(
            id=ApiLogId(next(self._ids)),
            method=method,
            route=route,
            user_agent_id=user_agent_id,
        )
        self._logs[entry.id] = entry
        return deepcopy(entry)

    async def complete(self, log_id: ApiLogId, route: str, status_code: int) -> None:
        """Record the matched route and response status code of a logged request."""
        entry = self._logs.get(log_id)
        if entry:
            self._logs[log_id] = entry.model_copy(
                update={"route": route, "status_code": status_code}
            )

    async def find_all(self) -> list[ApiLog]:
        """List all log entries, oldest first."""
        return [deepcopy(entry) for entry in self._logs.values()]
