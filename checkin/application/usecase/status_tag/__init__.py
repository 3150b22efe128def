"""Status tag use cases."""

from .common import StatusTagItem
from .create_status_tag import (
    CreateStatusTagRequest,
    CreateStatusTagResponse,
    CreateStatusTagUseCase,
)
from .delete_status_tag import DeleteStatusTagRequest, DeleteStatusTagUseCase
from .list_status_tags import (
    ListStatusTagsRequest,
    ListStatusTagsResponse,
    ListStatusTagsUseCase,
)
from .update_status_tag import (
    UpdateStatusTagRequest,
    UpdateStatusTagResponse,
    UpdateStatusTagUseCase,
)

__all__ = [
    "StatusTagItem",
    "CreateStatusTagRequest",
    "CreateStatusTagResponse",
    "CreateStatusTagUseCase",
    "DeleteStatusTagRequest",
    "DeleteStatusTagUseCase",
    "ListStatusTagsRequest",
    "ListStatusTagsResponse",
    "ListStatusTagsUseCase",
    "UpdateStatusTagRequest",
    "UpdateStatusTagResponse",
    "UpdateStatusTagUseCase",
]
