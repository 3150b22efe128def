"""Domain model entities for check-ins."""

from checkin.domain.model.api_log import ApiLog, UserAgent
from checkin.domain.model.status import Status
from checkin.domain.model.status_tag import StatusTag
from checkin.domain.model.user import Follow, User

__all__ = [
    "User",
    "Follow",
    "Status",
    "StatusTag",
    "ApiLog",
    "UserAgent",
]
