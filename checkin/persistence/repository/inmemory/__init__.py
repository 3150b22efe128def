"""In-memory repository implementations for testing."""

from .api_log import InMemoryApiLogRepository, InMemoryUserAgentRepository
from .status import InMemoryStatusRepository
from .status_tag import InMemoryStatusTagRepository
from .user import InMemoryFollowRepository, InMemoryUserRepository

__all__ = [
    "InMemoryApiLogRepository",
    "InMemoryFollowRepository",
    "InMemoryStatusRepository",
    "InMemoryStatusTagRepository",
    "InMemoryUserAgentRepository",
    "InMemoryUserRepository",
]
