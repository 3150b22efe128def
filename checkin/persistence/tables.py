"""SQLAlchemy table definitions for the check-in backend.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# FOLLOWS TABLE (user_id follows follow_id)
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "follow_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "follow_id", name="uq_follow"),
)

Index("idx_follows_follow_id", follows_table.c.follow_id)

# ============================================================================
# STATUSES TABLE
# ============================================================================
statuses_table = Table(
    "statuses",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("body", String(280), nullable=True),
    Column("visibility", SmallInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_statuses_user_id", statuses_table.c.user_id)

# ============================================================================
# STATUS_TAGS TABLE
# ============================================================================
status_tags_table = Table(
    "status_tags",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "status_id",
        BigInteger,
        ForeignKey("statuses.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("key", String(255), nullable=False),
    Column("value", String(255), nullable=False),
    Column("visibility", SmallInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Concurrent creates for the same key must fail here, not overwrite
    UniqueConstraint("status_id", "key", name="uq_status_tag_key"),
)

# ============================================================================
# USER_AGENTS TABLE
# ============================================================================
user_agents_table = Table(
    "user_agents",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("user_agent", String(255), nullable=False, unique=True),
)

# ============================================================================
# API_LOGS TABLE
# ============================================================================
api_logs_table = Table(
    "api_logs",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("method", String(10), nullable=False),
    Column("route", String(255), nullable=False),
    Column(
        "user_agent_id",
        BigInteger,
        ForeignKey("user_agents.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("status_code", SmallInteger, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_api_logs_created_at", api_logs_table.c.created_at)
