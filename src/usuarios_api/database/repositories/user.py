"""Repository helpers for working with users."""

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from usuarios_api.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[UserSchema]:
        """Return every stored user."""
        stmt = select(UserSchema).order_by(UserSchema.id)
        return list(self._session.scalars(stmt))

    def add(self, user: UserSchema) -> UserSchema:
        """Add new user to database."""
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user

    def update_nombre(self, user_id: str, nombre: str | None) -> int:
        """Set the name of the user with ``user_id``, returning affected rows."""
        stmt = update(UserSchema).where(UserSchema.id == user_id).values(nombre=nombre)
        result = self._session.execute(stmt, execution_options={"synchronize_session": False})
        return result.rowcount

    def delete(self, user_id: str) -> int:
        """Remove the user with ``user_id``, returning affected rows."""
        stmt = delete(UserSchema).where(UserSchema.id == user_id)
        result = self._session.execute(stmt, execution_options={"synchronize_session": False})
        return result.rowcount
