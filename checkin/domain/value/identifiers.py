"""Strongly typed identifiers for check-in domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Users are keyed by UUID, everything created per request by the database
UserId = NewType("UserId", UUID)
StatusId = NewType("StatusId", int)
StatusTagId = NewType("StatusTagId", int)
ApiLogId = NewType("ApiLogId", int)
UserAgentId = NewType("UserAgentId", int)
