"""API request log domain service."""

import unicodedata
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import logfire

from checkin.domain.model import ApiLog
from checkin.domain.repository import ApiLogRepository, UserAgentRepository

from .base import Service

UNKNOWN_ROUTE = "unknown"


@dataclass
class ApiLogContext:
    """Request-scoped handle on the log entry of one request.

    Callers set ``route`` once routing has matched and ``status_code`` once
    the response is known. Both are written when the surrounding
    ``ApiLogService.track`` block exits.
    """

    method: str
    route: str
    entry: ApiLog | None = None
    status_code: int | None = None


class ApiLogService(Service):
    """Records method, route, user agent and status code of API requests."""

    def __init__(
        self,
        api_log_repository: ApiLogRepository,
        user_agent_repository: UserAgentRepository,
        user_agent_max_length: int = 255,
    ) -> None:
        """Initialize API log service.

        Args:
            api_log_repository: Log entry store
            user_agent_repository: Distinct user agent store
            user_agent_max_length: Stored user agents are cut to this length
        """
        self.api_log_repository = api_log_repository
        self.user_agent_repository = user_agent_repository
        self.user_agent_max_length = user_agent_max_length

    def normalize_user_agent(self, user_agent: str | None) -> str:
        """Fold a user agent to ASCII and cut it to the column width."""
        folded = (
            unicodedata.normalize("NFKD", user_agent or "")
            .encode("ascii", "ignore")
            .decode("ascii")
        )
        return folded[: self.user_agent_max_length]

    @asynccontextmanager
    async def track(
        self, method: str, route: str | None, user_agent: str | None
    ) -> AsyncIterator[ApiLogContext]:
        """Log one request for the duration of the block.

        The entry is created on enter. Its route and status code are written
        on exit, also when the block raises (recorded as 500 unless the
        handler set a code). Storage failures are reported and never reach
        the request.

        Args:
            method: HTTP method
            route: Route template if already known, else ``unknown`` until set
            user_agent: Raw User-Agent header

        Yields:
            Context to record the matched route and status code on
        """
        context = ApiLogContext(method=method.upper(), route=route or UNKNOWN_ROUTE)
        await self._open(context, user_agent)
        try:
            yield context
        except BaseException:
            if context.status_code is None:
                context.status_code = 500
            raise
        finally:
            await self._close(context)

    async def _open(self, context: ApiLogContext, user_agent: str | None) -> None:
        try:
            agent = await self.user_agent_repository.first_or_create(
                self.normalize_user_agent(user_agent)
            )
            context.entry = await self.api_log_repository.create(
                method=context.method, route=context.route, user_agent_id=agent.id
            )
        except Exception:
            logfire.exception(
                "Failed to create API log entry",
                method=context.method,
                route=context.route,
            )

    async def _close(self, context: ApiLogContext) -> None:
        if context.entry is None or context.status_code is None:
            return
        try:
            await self.api_log_repository.complete(
                context.entry.id, context.route, context.status_code
            )
        except Exception:
            logfire.exception(
                "Failed to complete API log entry", log_id=context.entry.id
            )
