"""PostgreSQL implementation of StatusTag repository."""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from checkin.domain.error import DuplicateKeyError
from checkin.domain.model import StatusTag
from checkin.domain.repository import StatusTagRepository
from checkin.domain.value import StatusId, StatusVisibility
from checkin.persistence.mappers import row_to_status_tag, status_tag_to_dict
from checkin.persistence.tables import status_tags_table

UNIQUE_KEY_CONSTRAINT = "uq_status_tag_key"


def _is_duplicate_key(error: IntegrityError) -> bool:
    return UNIQUE_KEY_CONSTRAINT in str(error.orig)


class PostgresStatusTagRepository(StatusTagRepository):
    """PostgreSQL implementation of StatusTagRepository.

    Writes run inside a savepoint so a unique violation leaves the request
    transaction usable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def list_for_status(self, status_id: StatusId) -> list[StatusTag]:
        """List tags of a status in insertion order."""
        stmt = (
            select(status_tags_table)
            .where(status_tags_table.c.status_id == status_id)
            .order_by(status_tags_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_status_tag(dict(row)) for row in result.mappings().all()]

    async def find_by_key(self, status_id: StatusId, key: str) -> Optional[StatusTag]:
        """Find tag by key within a status."""
        stmt = (
            select(status_tags_table)
            .where(status_tags_table.c.status_id == status_id)
            .where(status_tags_table.c.key == key)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_status_tag(dict(row)) if row else None

    async def create(self, tag: StatusTag) -> StatusTag:
        """Insert a tag and return it with its assigned id."""
        stmt = (
            insert(status_tags_table)
            .values(**status_tag_to_dict(tag))
            .returning(*status_tags_table.c)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().one()
        except IntegrityError as e:
            if _is_duplicate_key(e):
                raise DuplicateKeyError(tag.status_id, tag.key) from e
            raise
        return row_to_status_tag(dict(row))

    async def update(self, tag: StatusTag, **fields: Any) -> StatusTag:
        """Overwrite the given columns of a stored tag."""
        values = dict(fields)
        if "visibility" in values:
            values["visibility"] = int(StatusVisibility(values["visibility"]))
        values["updated_at"] = datetime.now(timezone.utc)

        stmt = (
            update(status_tags_table)
            .where(status_tags_table.c.id == tag.id)
            .values(**values)
            .returning(*status_tags_table.c)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().one()
        except IntegrityError as e:
            if _is_duplicate_key(e):
                raise DuplicateKeyError(tag.status_id, values.get("key", tag.key)) from e
            raise
        return row_to_status_tag(dict(row))

    async def delete(self, tag: StatusTag) -> None:
        """Delete a tag."""
        stmt = delete(status_tags_table).where(status_tags_table.c.id == tag.id)
        await self.session.execute(stmt)
        await self.session.flush()
