"""Database connection management utilities."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from usuarios_api.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)


class DatabaseService:
    """Wraps a single-connection SQLAlchemy engine and its session factory."""

    def __init__(
        self,
        url: str | URL | None = None,
        *,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._url = make_url(url or config.sqlalchemy_url)
        connect_args = {}
        if self._url.get_backend_name() == "sqlite":
            connect_args["check_same_thread"] = False
        # One DBAPI connection shared by every request; each statement commits
        # on its own.
        self._engine = create_engine(
            self._url,
            poolclass=StaticPool,
            isolation_level="AUTOCOMMIT",
            connect_args=connect_args,
        )
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )
        self.connected = False

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def connect(self, *, fail_fast: bool = False) -> bool:
        """Open the connection and probe it.

        Failures are logged and leave the service degraded unless ``fail_fast``
        is set, in which case the error propagates.
        """

        logger.info("Connecting to database at %s", self._url.host or self._url.database)
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Could not connect to the database")
            if fail_fast:
                raise
            self.connected = False
            return False
        logger.info("Connected to the database")
        self.connected = True
        return True

    def dispose(self) -> None:
        """Close the underlying connection."""

        self._engine.dispose()
        self.connected = False

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a session scope; statements are already committed when it exits."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
