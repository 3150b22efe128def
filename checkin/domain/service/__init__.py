"""Domain services."""

from .api_log_service import ApiLogContext, ApiLogService
from .authorization_gate import AuthorizationGate
from .base import Service
from .jwt_service import JWTService
from .status_service import StatusService
from .status_tag_service import StatusTagService
from .user_service import UserService
from .visibility_policy import VisibilityPolicy

__all__ = [
    "ApiLogContext",
    "ApiLogService",
    "AuthorizationGate",
    "JWTService",
    "Service",
    "StatusService",
    "StatusTagService",
    "UserService",
    "VisibilityPolicy",
]
