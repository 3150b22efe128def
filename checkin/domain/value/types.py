"""Domain value types for check-ins.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum


class StatusVisibility(IntEnum):
    """Who may see a status or one of its tags.

    The integer value is the stored and serialized representation.
    """

    PUBLIC = 0
    UNLISTED = 1
    FOLLOWERS = 2
    PRIVATE = 3
    AUTHENTICATED = 4

    @classmethod
    def keys(cls) -> list[str]:
        """Lower-case level names accepted on input."""
        return [member.name.lower() for member in cls]


class Action(str, Enum):
    """Mutating actions checked by the authorization gate."""

    UPDATE = "update"
    DESTROY = "destroy"
