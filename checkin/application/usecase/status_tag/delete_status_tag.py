"""Delete status tag use case."""

import logfire
from pydantic import BaseModel

from checkin.application.usecase.base import BaseUseCase
from checkin.domain.service import StatusTagService, UserService
from checkin.domain.value import StatusId

from .common import load_actor


class DeleteStatusTagRequest(BaseModel):
    """Delete status tag request."""

    status_id: int
    tag_key: str
    user_id: str | None


class DeleteStatusTagUseCase(BaseUseCase):
    """Use case for removing a tag from a status."""

    def __init__(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> None:
        self.status_tag_service = status_tag_service
        self.user_service = user_service

    async def execute(self, request: DeleteStatusTagRequest) -> None:
        """Execute delete status tag flow.

        Raises:
            NotFoundError: If the status or tag does not exist
            NotAuthorizedError: If the user does not own the status
        """
        with logfire.span(
            "delete_status_tag.execute",
            status_id=request.status_id,
            tag_key=request.tag_key,
        ):
            actor = await load_actor(self.user_service, request.user_id)
            await self.status_tag_service.destroy(
                StatusId(request.status_id), request.tag_key, actor
            )
