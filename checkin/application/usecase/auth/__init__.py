"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

__all__ = ["GetCurrentUserRequest", "GetCurrentUserResponse", "GetCurrentUserUseCase"]
