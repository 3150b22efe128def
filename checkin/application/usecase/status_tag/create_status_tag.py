"""Create status tag use case."""

import logfire
from pydantic import BaseModel

from checkin.application.usecase.base import BaseUseCase
from checkin.domain.service import StatusTagService, UserService
from checkin.domain.value import StatusId

from .common import StatusTagItem, load_actor


class CreateStatusTagRequest(BaseModel):
    """Create status tag request."""

    status_id: int
    user_id: str | None  # Acting user, None when anonymous
    key: str
    value: str
    visibility: str | int | None = None  # Level name or stored value, None for the default


class CreateStatusTagResponse(BaseModel):
    """Create status tag response."""

    tag: StatusTagItem


class CreateStatusTagUseCase(BaseUseCase):
    """Use case for attaching a tag to a status."""

    def __init__(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> None:
        self.status_tag_service = status_tag_service
        self.user_service = user_service

    async def execute(self, request: CreateStatusTagRequest) -> CreateStatusTagResponse:
        """Execute create status tag flow.

        Raises:
            NotFoundError: If the status does not exist
            DuplicateKeyError: If the key is already used on the status
            NotAuthorizedError: If the user does not own the status
            UnknownVisibilityError: If the visibility does not resolve
        """
        with logfire.span(
            "create_status_tag.execute", status_id=request.status_id, key=request.key
        ):
            actor = await load_actor(self.user_service, request.user_id)
            tag = await self.status_tag_service.create(
                StatusId(request.status_id),
                actor,
                key=request.key,
                value=request.value,
                visibility=request.visibility,
            )
            return CreateStatusTagResponse(tag=StatusTagItem.from_tag(tag))
