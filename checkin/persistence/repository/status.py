"""PostgreSQL implementation of Status repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from checkin.domain.model import Status
from checkin.domain.repository import StatusRepository
from checkin.domain.value import StatusId
from checkin.persistence.mappers import row_to_status, status_to_dict
from checkin.persistence.tables import statuses_table


class PostgresStatusRepository(StatusRepository):
    """PostgreSQL implementation of StatusRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, status_id: StatusId) -> Optional[Status]:
        """Find status by ID."""
        stmt = select(statuses_table).where(statuses_table.c.id == status_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_status(dict(row)) if row else None

    async def save(self, status: Status) -> Status:
        """Save or update a status."""
        status_dict = status_to_dict(status)
        stmt = (
            insert(statuses_table)
            .values(**status_dict)
            .on_conflict_do_update(
                index_elements=[statuses_table.c.id],
                set_={
                    "body": status_dict["body"],
                    "visibility": status_dict["visibility"],
                },
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return status
