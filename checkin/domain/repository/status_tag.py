"""Status tag repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from checkin.domain.model.status_tag import StatusTag
from checkin.domain.value import StatusId


class StatusTagRepository(ABC):
    """Repository for tags scoped under a status.

    Every operation is scoped to a single status. Keys are unique per
    status only; the same key may appear on any number of statuses.
    """

    @abstractmethod
    async def list_for_status(self, status_id: StatusId) -> list[StatusTag]:
        """List all tags of a status.

        Args:
            status_id: Owning status

        Returns:
            Tags in insertion order
        """
        pass

    @abstractmethod
    async def find_by_key(self, status_id: StatusId, key: str) -> Optional[StatusTag]:
        """Find a tag by key within a status.

        Args:
            status_id: Owning status
            key: Tag key

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, tag: StatusTag) -> StatusTag:
        """Insert a new tag.

        Args:
            tag: Tag without an id

        Returns:
            Stored tag with its id assigned

        Raises:
            DuplicateKeyError: If the status already has a tag with this key
        """
        pass

    @abstractmethod
    async def update(self, tag: StatusTag, **fields: Any) -> StatusTag:
        """Apply field changes to a stored tag.

        Args:
            tag: Stored tag
            **fields: Columns to overwrite (``key``, ``value``, ``visibility``)

        Returns:
            Updated tag

        Raises:
            DuplicateKeyError: If a key change collides with another tag
        """
        pass

    @abstractmethod
    async def delete(self, tag: StatusTag) -> None:
        """Delete a tag.

        Args:
            tag: Stored tag
        """
        pass
