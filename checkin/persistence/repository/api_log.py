"""PostgreSQL implementation of the API log repositories."""

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from checkin.domain.model import ApiLog, UserAgent
from checkin.domain.repository import ApiLogRepository, UserAgentRepository
from checkin.domain.value import ApiLogId, UserAgentId
from checkin.persistence.mappers import row_to_api_log, row_to_user_agent
from checkin.persistence.tables import api_logs_table, user_agents_table


class PostgresUserAgentRepository(UserAgentRepository):
    """PostgreSQL implementation of UserAgentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def first_or_create(self, user_agent: str) -> UserAgent:
        """Return the stored user agent, inserting it when unknown."""
        # No-op update so RETURNING yields the row on conflict as well
        stmt = (
            pg_insert(user_agents_table)
            .values(user_agent=user_agent)
            .on_conflict_do_update(
                index_elements=[user_agents_table.c.user_agent],
                set_={"user_agent": user_agent},
            )
            .returning(*user_agents_table.c)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.mappings().one()
        return row_to_user_agent(dict(row))


class PostgresApiLogRepository(ApiLogRepository):
    """PostgreSQL implementation of ApiLogRepository.

    Each write runs inside a savepoint so a failed log write leaves the
    session usable for the commit at the end of the request scope.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self, method: str, route: str, user_agent_id: UserAgentId | None
    ) -> ApiLog:
        """Insert a log entry for an incoming request."""
        stmt = (
            insert(api_logs_table)
            .values(method=method, route=route, user_agent_id=user_agent_id)
            .returning(*api_logs_table.c)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.mappings().one()
        return row_to_api_log(dict(row))

    async def complete(self, log_id: ApiLogId, route: str, status_code: int) -> None:
        """Record the matched route and response status code of a logged request."""
        stmt = (
            update(api_logs_table)
            .where(api_logs_table.c.id == log_id)
            .values(route=route, status_code=status_code)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def find_all(self) -> list[ApiLog]:
        """List all log entries, oldest first."""
        stmt = select(api_logs_table).order_by(api_logs_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_api_log(dict(row)) for row in result.mappings().all()]
