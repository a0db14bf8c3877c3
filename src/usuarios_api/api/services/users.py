"""User management domain logic."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from usuarios_api.database import UserRepository, UserSchema

logger = logging.getLogger(__name__)


class MissingFieldsError(Exception):
    """Raised when a required field is absent or empty."""


class StoreError(Exception):
    """Raised when the database rejects or fails a statement."""


class UserService:
    """Runs user operations against the store.

    Every store failure is logged here with its traceback and re-raised as
    :class:`StoreError`, which carries no database detail.
    """

    def list_users(self, *, session: Session) -> list[UserSchema]:
        repository = UserRepository(session)
        try:
            return repository.list_all()
        except SQLAlchemyError as exc:
            logger.exception("Failed to list users")
            raise StoreError("list") from exc

    def create_user(
        self, *, session: Session, nombre: str | None, correo: str | None
    ) -> UserSchema:
        if not nombre or not correo:
            raise MissingFieldsError("nombre, correo")

        repository = UserRepository(session)
        try:
            user = repository.add(UserSchema(nombre=nombre, correo=correo))
        except SQLAlchemyError as exc:
            logger.exception("Failed to create user")
            raise StoreError("create") from exc
        logger.info("Created user %s", user.id)
        return user

    def update_user(self, *, session: Session, user_id: str, nombre: str | None) -> int:
        """Rename a user; a missing ``nombre`` is passed through as NULL."""

        repository = UserRepository(session)
        try:
            affected = repository.update_nombre(user_id, nombre)
        except SQLAlchemyError as exc:
            logger.exception("Failed to update user %s", user_id)
            raise StoreError("update") from exc
        logger.debug("Update of user %s affected %d row(s)", user_id, affected)
        return affected

    def delete_user(self, *, session: Session, user_id: str) -> int:
        repository = UserRepository(session)
        try:
            affected = repository.delete(user_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to delete user %s", user_id)
            raise StoreError("delete") from exc
        logger.debug("Delete of user %s affected %d row(s)", user_id, affected)
        return affected
