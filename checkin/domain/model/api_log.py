"""API request log entities."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from checkin.domain.model.common import DomainModel
from checkin.domain.value import ApiLogId, UserAgentId


class UserAgent(DomainModel):
    """Distinct client user agent string."""

    id: UserAgentId
    user_agent: str = Field(max_length=255)


class ApiLog(DomainModel):
    """One API request.

    ``status_code`` stays empty until the response has been produced.
    """

    id: ApiLogId
    method: str = Field(max_length=10)
    route: str = Field(max_length=255)
    user_agent_id: Optional[UserAgentId] = None
    status_code: Optional[int] = None
    created_at: datetime = Field(default_factory=datetime.now)
