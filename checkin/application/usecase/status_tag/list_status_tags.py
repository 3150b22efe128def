"""List status tags use case."""

import logfire
from pydantic import BaseModel

from checkin.application.usecase.base import BaseUseCase
from checkin.domain.service import StatusTagService, UserService
from checkin.domain.value import StatusId

from .common import StatusTagItem, load_actor


class ListStatusTagsRequest(BaseModel):
    """List status tags request."""

    status_id: int
    viewer_id: str | None = None  # None when anonymous


class ListStatusTagsResponse(BaseModel):
    """List status tags response."""

    tags: list[StatusTagItem]


class ListStatusTagsUseCase(BaseUseCase):
    """Use case for listing the tags of a status visible to the viewer."""

    def __init__(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> None:
        """Initialize list status tags use case.

        Args:
            status_tag_service: Status tag domain service
            user_service: User domain service
        """
        self.status_tag_service = status_tag_service
        self.user_service = user_service

    async def execute(self, request: ListStatusTagsRequest) -> ListStatusTagsResponse:
        """Execute list status tags flow.

        Args:
            request: Status and optional viewer

        Returns:
            Visible tags in insertion order

        Raises:
            NotFoundError: If the status does not exist
        """
        with logfire.span("list_status_tags.execute", status_id=request.status_id):
            viewer = await load_actor(self.user_service, request.viewer_id)
            tags = await self.status_tag_service.list_visible(
                StatusId(request.status_id), viewer
            )
            logfire.info("Status tags listed", count=len(tags))
            return ListStatusTagsResponse(
                tags=[StatusTagItem.from_tag(tag) for tag in tags]
            )
