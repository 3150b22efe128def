"""In-memory implementation of StatusTag repository for testing."""

from copy import deepcopy
from datetime import datetime
from itertools import count
from typing import Any, Optional

from checkin.domain.error import DuplicateKeyError
from checkin.domain.model import StatusTag
from checkin.domain.repository import StatusTagRepository
from checkin.domain.value import StatusId, StatusTagId


class InMemoryStatusTagRepository(StatusTagRepository):
    """In-memory implementation of StatusTagRepository for testing.

    Mirrors the database unique constraint on ``(status_id, key)``.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        # dicts keep insertion order, ids grow monotonically
        self._tags: dict[StatusTagId, StatusTag] = {}
        self._ids = count(1)

    async def list_for_status(self, status_id: StatusId) -> list[StatusTag]:
        """List tags of a status in insertion order."""
        return [
            deepcopy(tag) for tag in self._tags.values() if tag.status_id == status_id
        ]

    async def find_by_key(self, status_id: StatusId, key: str) -> Optional[StatusTag]:
        """Find tag by key within a status."""
        tag = self._find(status_id, key)
        return deepcopy(tag) if tag else None

    async def create(self, tag: StatusTag) -> StatusTag:
        """Insert a tag and assign its id."""
        if self._find(tag.status_id, tag.key) is not None:
            raise DuplicateKeyError(tag.status_id, tag.key)
        stored = tag.model_copy(update={"id": StatusTagId(next(self._ids))})
        self._tags[stored.id] = stored
        return deepcopy(stored)

    async def update(self, tag: StatusTag, **fields: Any) -> StatusTag:
        """Overwrite the given fields of a stored tag."""
        new_key = fields.get("key", tag.key)
        existing = self._find(tag.status_id, new_key)
        if existing is not None and existing.id != tag.id:
            raise DuplicateKeyError(tag.status_id, new_key)
        stored = self._tags[tag.id].model_copy(
            update={**fields, "updated_at": datetime.now()}
        )
        self._tags[stored.id] = stored
        return deepcopy(stored)

    async def delete(self, tag: StatusTag) -> None:
        """Delete a tag."""
        self._tags.pop(tag.id, None)

    def _find(self, status_id: StatusId, key: str) -> Optional[StatusTag]:
        return next(
            (
                tag
                for tag in self._tags.values()
                if tag.status_id == status_id and tag.key == key
            ),
            None,
        )
