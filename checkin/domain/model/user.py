"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from checkin.domain.model.common import DomainModel
from checkin.domain.value import UserId


class User(DomainModel):
    """A registered traveller who checks in and tags statuses."""

    id: UserId
    handle: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)


class Follow(DomainModel):
    """``user_id`` follows ``follow_id``."""

    user_id: UserId
    follow_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
