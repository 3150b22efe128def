"""Status domain service."""

import logfire

from checkin.domain.error import NotFoundError
from checkin.domain.model import Status
from checkin.domain.repository import StatusRepository
from checkin.domain.value import StatusId

from .base import Service


class StatusService(Service):
    """Loads parent statuses for the tag subsystem."""

    def __init__(self, status_repository: StatusRepository) -> None:
        self.status_repository = status_repository

    async def get_by_id(self, status_id: StatusId) -> Status:
        """Get status by ID.

        Raises:
            NotFoundError: If the status does not exist
        """
        with logfire.span("status_service.get_by_id", status_id=status_id):
            status = await self.status_repository.find_by_id(status_id)
            if status is None:
                logfire.warn("Status not found", status_id=status_id)
                raise NotFoundError("Status", str(status_id))
            return status
