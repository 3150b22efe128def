"""API request log repository interfaces."""

from abc import ABC, abstractmethod

from checkin.domain.model.api_log import ApiLog, UserAgent
from checkin.domain.value import ApiLogId, UserAgentId


class UserAgentRepository(ABC):
    """Repository for distinct user agent strings."""

    @abstractmethod
    async def first_or_create(self, user_agent: str) -> UserAgent:
        """Return the stored user agent, inserting it when unknown.

        Args:
            user_agent: Normalized user agent string

        Returns:
            Stored user agent
        """
        pass


class ApiLogRepository(ABC):
    """Repository for API request log entries."""

    @abstractmethod
    async def create(
        self, method: str, route: str, user_agent_id: UserAgentId | None
    ) -> ApiLog:
        """Insert a log entry for an incoming request.

        Returns:
            Stored entry without a status code
        """
        pass

    @abstractmethod
    async def complete(self, log_id: ApiLogId, route: str, status_code: int) -> None:
        """Record the matched route and response status code of a logged request."""
        pass

    @abstractmethod
    async def find_all(self) -> list[ApiLog]:
        """List all log entries, oldest first."""
        pass
