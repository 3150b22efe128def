"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from checkin.domain.model import ApiLog, Follow, Status, StatusTag, User, UserAgent
from checkin.domain.value import (
    ApiLogId,
    StatusId,
    StatusTagId,
    StatusVisibility,
    UserAgentId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        handle=row["handle"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return follow.model_dump()


def row_to_status(row: Dict[str, Any]) -> Status:
    """Convert database row to Status domain model."""
    return Status(
        id=StatusId(row["id"]),
        user_id=UserId(_uuid(row["user_id"])),
        body=row.get("body"),
        visibility=StatusVisibility(row["visibility"]),
        created_at=row["created_at"],
    )


def status_to_dict(status: Status) -> Dict[str, Any]:
    """Convert Status domain model to database dict."""
    data = status.model_dump()
    data["visibility"] = int(status.visibility)
    return data


def row_to_status_tag(row: Dict[str, Any]) -> StatusTag:
    """Convert database row to StatusTag domain model."""
    return StatusTag(
        id=StatusTagId(row["id"]),
        status_id=StatusId(row["status_id"]),
        key=row["key"],
        value=row["value"],
        visibility=StatusVisibility(row["visibility"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def status_tag_to_dict(tag: StatusTag) -> Dict[str, Any]:
    """Convert StatusTag domain model to database dict.

    The id is left out when unset so the database assigns it.
    """
    data = tag.model_dump(exclude_none=True)
    data["visibility"] = int(tag.visibility)
    return data


def row_to_user_agent(row: Dict[str, Any]) -> UserAgent:
    """Convert database row to UserAgent domain model."""
    return UserAgent(id=UserAgentId(row["id"]), user_agent=row["user_agent"])


def row_to_api_log(row: Dict[str, Any]) -> ApiLog:
    """Convert database row to ApiLog domain model."""
    user_agent_id = row.get("user_agent_id")
    return ApiLog(
        id=ApiLogId(row["id"]),
        method=row["method"],
        route=row["route"],
        user_agent_id=UserAgentId(user_agent_id) if user_agent_id is not None else None,
        status_code=row.get("status_code"),
        created_at=row["created_at"],
    )
