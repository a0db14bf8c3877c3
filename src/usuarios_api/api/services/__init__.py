"""Service layer for API-specific business logic."""

from usuarios_api.api.services.users import (
    MissingFieldsError,
    StoreError,
    UserService,
)

__all__ = ["MissingFieldsError", "StoreError", "UserService"]
