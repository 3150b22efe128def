"""Status repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from checkin.domain.model.status import Status
from checkin.domain.value import StatusId


class StatusRepository(ABC):
    """Repository for Status aggregate.

    Statuses are created by the check-in flow; the tag subsystem only
    needs to load them.
    """

    @abstractmethod
    async def find_by_id(self, status_id: StatusId) -> Optional[Status]:
        """Find a status by ID.

        Args:
            status_id: Status identifier

        Returns:
            Status if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, status: Status) -> Status:
        """Save a status (create or update).

        Args:
            status: Status to save

        Returns:
            Saved status
        """
        pass
