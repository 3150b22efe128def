"""Status aggregate root.

A status is a single check-in posted by a user. It is the parent resource
that owns a set of status tags.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from checkin.domain.model.common import DomainModel
from checkin.domain.value import StatusId, StatusVisibility, UserId


class Status(DomainModel):
    """Check-in status owned by a single user."""

    id: StatusId
    user_id: UserId
    body: Optional[str] = Field(default=None, max_length=280)
    visibility: StatusVisibility = StatusVisibility.PUBLIC
    created_at: datetime = Field(default_factory=datetime.now)

    def is_owned_by(self, user_id: UserId | None) -> bool:
        """Check whether ``user_id`` posted this status."""
        return user_id is not None and self.user_id == user_id
