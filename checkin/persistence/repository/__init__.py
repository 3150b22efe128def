"""PostgreSQL repository implementations."""

from checkin.persistence.repository.api_log import (
    PostgresApiLogRepository,
    PostgresUserAgentRepository,
)
from checkin.persistence.repository.status import PostgresStatusRepository
from checkin.persistence.repository.status_tag import PostgresStatusTagRepository
from checkin.persistence.repository.user import (
    PostgresFollowRepository,
    PostgresUserRepository,
)

__all__ = [
    "PostgresUserRepository",
    "PostgresFollowRepository",
    "PostgresStatusRepository",
    "PostgresStatusTagRepository",
    "PostgresUserAgentRepository",
    "PostgresApiLogRepository",
]
