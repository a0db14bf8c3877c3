"""Models used for API request and response payloads."""

from usuarios_api.api.models.users import (
    ErrorResponse,
    UserCreateRequest,
    UserCreatedResponse,
    UserDeletedResponse,
    UserResponse,
    UserUpdateRequest,
    UserUpdatedResponse,
    UserUpdateSummary,
)

__all__ = [
    "ErrorResponse",
    "UserCreateRequest",
    "UserCreatedResponse",
    "UserDeletedResponse",
    "UserResponse",
    "UserUpdateRequest",
    "UserUpdateSummary",
    "UserUpdatedResponse",
]
