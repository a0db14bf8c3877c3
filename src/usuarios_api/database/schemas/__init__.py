"""SQLAlchemy table declarations."""

from usuarios_api.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
