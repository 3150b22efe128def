"""Domain value objects for check-ins."""

from checkin.domain.value.identifiers import (
    ApiLogId,
    StatusId,
    StatusTagId,
    UserAgentId,
    UserId,
)
from checkin.domain.value.result import Err, Ok, Result
from checkin.domain.value.types import Action, StatusVisibility

__all__ = [
    # Identifiers
    "UserId",
    "StatusId",
    "StatusTagId",
    "ApiLogId",
    "UserAgentId",
    # Types
    "Action",
    "StatusVisibility",
    # Results
    "Ok",
    "Err",
    "Result",
]
