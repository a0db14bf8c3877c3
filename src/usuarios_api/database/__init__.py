"""Database connectivity helpers and schema objects."""

from usuarios_api.database.base import BaseSchema
from usuarios_api.database.dependencies import get_database, get_session
from usuarios_api.database.repositories import UserRepository
from usuarios_api.database.schemas import UserSchema
from usuarios_api.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
]
