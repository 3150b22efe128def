"""Update status tag use case."""

import logfire
from pydantic import BaseModel

from checkin.application.usecase.base import BaseUseCase
from checkin.domain.service import StatusTagService, UserService
from checkin.domain.value import StatusId

from .common import StatusTagItem, load_actor


class UpdateStatusTagRequest(BaseModel):
    """Update status tag request.

    ``value`` replaces the stored value on every call; ``key`` and
    ``visibility`` are only changed when given.
    """

    status_id: int
    tag_key: str
    user_id: str | None
    value: str
    key: str | None = None
    visibility: str | None = None


class UpdateStatusTagResponse(BaseModel):
    """Update status tag response."""

    tag: StatusTagItem


class UpdateStatusTagUseCase(BaseUseCase):
    """Use case for editing a status tag."""

    def __init__(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> None:
        self.status_tag_service = status_tag_service
        self.user_service = user_service

    async def execute(self, request: UpdateStatusTagRequest) -> UpdateStatusTagResponse:
        """Execute update status tag flow.

        Raises:
            NotFoundError: If the status or tag does not exist
            NotAuthorizedError: If the user does not own the status
            UnknownVisibilityError: If the visibility does not resolve
            DuplicateKeyError: If the new key is already used on the status
        """
        with logfire.span(
            "update_status_tag.execute",
            status_id=request.status_id,
            tag_key=request.tag_key,
        ):
            actor = await load_actor(self.user_service, request.user_id)
            tag = await self.status_tag_service.update(
                StatusId(request.status_id),
                request.tag_key,
                actor,
                value=request.value,
                visibility=request.visibility,
                key=request.key,
            )
            return UpdateStatusTagResponse(tag=StatusTagItem.from_tag(tag))
