"""Status tag entity.

Tags are free-form key/value annotations on a status, e.g. ``seat=12A`` or
``ticket=BahnCard 50``. Each tag carries its own visibility so a traveller
can share the seat with followers but keep the booking code private.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from checkin.domain.model.common import DomainModel
from checkin.domain.value import StatusId, StatusTagId, StatusVisibility

TAG_FIELD_MAX_LENGTH = 255


class StatusTag(DomainModel):
    """Key/value tag attached to a status.

    ``key`` is unique per status. ``id`` is assigned by the store on create.
    """

    id: Optional[StatusTagId] = None
    status_id: StatusId
    key: str = Field(min_length=1, max_length=TAG_FIELD_MAX_LENGTH)
    value: str = Field(min_length=1, max_length=TAG_FIELD_MAX_LENGTH)
    visibility: StatusVisibility = StatusVisibility.PUBLIC
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
