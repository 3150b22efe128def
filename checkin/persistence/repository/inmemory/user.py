"""In-memory implementation of User and Follow repositories for testing."""

from copy import deepcopy
from typing import Optional

from checkin.domain.model import Follow, User
from checkin.domain.repository import FollowRepository, UserRepository
from checkin.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID."""
        user = self._users.get(user_id)
        return deepcopy(user) if user else None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = deepcopy(user)
        return deepcopy(user)


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: set[tuple[UserId, UserId]] = set()

    async def is_following(self, user_id: UserId, follow_id: UserId) -> bool:
        """Check whether ``user_id`` follows ``follow_id``."""
        return (user_id, follow_id) in self._follows

    async def save(self, follow: Follow) -> Follow:
        """Store a follow relationship."""
        self._follows.add((follow.user_id, follow.follow_id))
        return follow
