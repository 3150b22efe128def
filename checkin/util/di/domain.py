"""Domain layer DI providers."""

from dishka import Scope, provide

from checkin.config import ApiLogSettings, AuthSettings, TagSettings
from checkin.domain.repository import (
    ApiLogRepository,
    FollowRepository,
    StatusRepository,
    StatusTagRepository,
    UserAgentRepository,
    UserRepository,
)
from checkin.domain.service import (
    ApiLogService,
    AuthorizationGate,
    JWTService,
    StatusService,
    StatusTagService,
    UserService,
    VisibilityPolicy,
)
from checkin.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_status_service(self, status_repository: StatusRepository) -> StatusService:
        """Provide status domain service."""
        return StatusService(status_repository=status_repository)

    @provide
    def get_visibility_policy(
        self, follow_repository: FollowRepository, tag_settings: TagSettings
    ) -> VisibilityPolicy:
        """Provide visibility policy with the configured default level."""
        return VisibilityPolicy(
            follow_repository=follow_repository,
            default_visibility=tag_settings.default_visibility,
        )

    @provide
    def get_authorization_gate(
        self, status_repository: StatusRepository
    ) -> AuthorizationGate:
        """Provide authorization gate."""
        return AuthorizationGate(status_repository=status_repository)

    @provide
    def get_status_tag_service(
        self,
        status_tag_repository: StatusTagRepository,
        status_service: StatusService,
        visibility_policy: VisibilityPolicy,
        authorization_gate: AuthorizationGate,
    ) -> StatusTagService:
        """Provide status tag domain service."""
        return StatusTagService(
            status_tag_repository=status_tag_repository,
            status_service=status_service,
            visibility_policy=visibility_policy,
            authorization_gate=authorization_gate,
        )

    @provide
    def get_api_log_service(
        self,
        api_log_repository: ApiLogRepository,
        user_agent_repository: UserAgentRepository,
        api_log_settings: ApiLogSettings,
    ) -> ApiLogService:
        """Provide API request log service."""
        return ApiLogService(
            api_log_repository=api_log_repository,
            user_agent_repository=user_agent_repository,
            user_agent_max_length=api_log_settings.user_agent_max_length,
        )
