"""Shared models for status tag use cases."""

from uuid import UUID

from pydantic import BaseModel

from checkin.domain.model import StatusTag, User
from checkin.domain.service import UserService
from checkin.domain.value import UserId


class StatusTagItem(BaseModel):
    """Status tag as returned by the API.

    ``visibility`` is the stored integer level.
    """

    key: str
    value: str
    visibility: int

    @classmethod
    def from_tag(cls, tag: StatusTag) -> "StatusTagItem":
        return cls(key=tag.key, value=tag.value, visibility=int(tag.visibility))


async def load_actor(user_service: UserService, user_id: str | None) -> User | None:
    """Load the acting user, None for anonymous requests."""
    if user_id is None:
        return None
    return await user_service.get_by_id(UserId(UUID(user_id)))
