"""In-memory implementation of Status repository for testing."""

from copy import deepcopy
from typing import Optional

from checkin.domain.model import Status
from checkin.domain.repository import StatusRepository
from checkin.domain.value import StatusId


class InMemoryStatusRepository(StatusRepository):
    """In-memory implementation of StatusRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._statuses: dict[StatusId, Status] = {}

    async def find_by_id(self, status_id: StatusId) -> Optional[Status]:
        """Find status by ID."""
        status = self._statuses.get(status_id)
        return deepcopy(status) if status else None

    async def save(self, status: Status) -> Status:
        """Save or update a status."""
        self._statuses[status.id] = deepcopy(status)
        return deepcopy(status)
