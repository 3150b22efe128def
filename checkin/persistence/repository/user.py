"""PostgreSQL implementation of User and Follow repositories."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from checkin.domain.model import Follow, User
from checkin.domain.repository import FollowRepository, UserRepository
from checkin.domain.value import UserId
from checkin.persistence.mappers import follow_to_dict, row_to_user, user_to_dict
from checkin.persistence.tables import follows_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**user_dict)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={"handle": user_dict["handle"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def is_following(self, user_id: UserId, follow_id: UserId) -> bool:
        """Check whether ``user_id`` follows ``follow_id``."""
        stmt = (
            select(follows_table.c.user_id)
            .where(follows_table.c.user_id == user_id)
            .where(follows_table.c.follow_id == follow_id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, follow: Follow) -> Follow:
        """Store a follow relationship, ignoring duplicates."""
        stmt = (
            insert(follows_table)
            .values(**follow_to_dict(follow))
            .on_conflict_do_nothing(constraint="uq_follow")
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return follow
