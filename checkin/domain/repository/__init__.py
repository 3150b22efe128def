"""Repository interfaces for the check-in domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from checkin.domain.repository.api_log import ApiLogRepository, UserAgentRepository
from checkin.domain.repository.status import StatusRepository
from checkin.domain.repository.status_tag import StatusTagRepository
from checkin.domain.repository.user import FollowRepository, UserRepository

__all__ = [
    "UserRepository",
    "FollowRepository",
    "StatusRepository",
    "StatusTagRepository",
    "UserAgentRepository",
    "ApiLogRepository",
]
