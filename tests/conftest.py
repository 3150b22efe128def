"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from checkin.domain.model import Status, StatusTag, User
from checkin.domain.value import StatusId, StatusVisibility, UserId

# Spans stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(handle: str = "traveller") -> User:
    """Build a user with a fresh id."""
    return User(id=UserId(uuid4()), handle=handle, created_at=datetime.now())


def make_status(owner: User, status_id: int = 1) -> Status:
    """Build a public status owned by ``owner``."""
    return Status(
        id=StatusId(status_id),
        user_id=owner.id,
        body="Boarding the ICE to Hamburg",
        visibility=StatusVisibility.PUBLIC,
    )


def make_tag(
    status: Status,
    key: str = "seat",
    value: str = "12A",
    visibility: StatusVisibility = StatusVisibility.PUBLIC,
) -> StatusTag:
    """Build an unsaved tag on ``status``."""
    return StatusTag(status_id=status.id, key=key, value=value, visibility=visibility)
