"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from checkin.domain.model.user import Follow, User
from checkin.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass


class FollowRepository(ABC):
    """Repository for follow relationships between users."""

    @abstractmethod
    async def is_following(self, user_id: UserId, follow_id: UserId) -> bool:
        """Check whether ``user_id`` follows ``follow_id``."""
        pass

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Store a follow relationship (idempotent)."""
        pass
