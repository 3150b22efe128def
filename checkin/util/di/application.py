"""Application layer DI providers."""

from dishka import Scope, provide

from checkin.application.usecase.auth import GetCurrentUserUseCase
from checkin.application.usecase.status_tag import (
    CreateStatusTagUseCase,
    DeleteStatusTagUseCase,
    ListStatusTagsUseCase,
    UpdateStatusTagUseCase,
)
from checkin.domain.service import JWTService, StatusTagService, UserService
from checkin.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Status tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_status_tags_use_case(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> ListStatusTagsUseCase:
        """Provide list status tags use case."""
        return ListStatusTagsUseCase(
            status_tag_service=status_tag_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_status_tag_use_case(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> CreateStatusTagUseCase:
        """Provide create status tag use case."""
        return CreateStatusTagUseCase(
            status_tag_service=status_tag_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_status_tag_use_case(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> UpdateStatusTagUseCase:
        """Provide update status tag use case."""
        return UpdateStatusTagUseCase(
            status_tag_service=status_tag_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_status_tag_use_case(
        self, status_tag_service: StatusTagService, user_service: UserService
    ) -> DeleteStatusTagUseCase:
        """Provide delete status tag use case."""
        return DeleteStatusTagUseCase(
            status_tag_service=status_tag_service, user_service=user_service
        )
