"""Connection management tests."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from usuarios_api.api.services import StoreError, UserService
from usuarios_api.database import DatabaseService, UserRepository, UserSchema

if TYPE_CHECKING:
    from pathlib import Path


def test_connect_succeeds_on_reachable_store(database: DatabaseService) -> None:
    assert database.connect() is True
    assert database.connected is True


def test_connect_failure_is_logged_and_tolerated(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    db = DatabaseService(f"sqlite:///{tmp_path / 'missing' / 'usuarios.db'}")

    assert db.connect() is False
    assert db.connected is False
    assert "Could not connect to the database" in caplog.text


def test_connect_failure_propagates_with_fail_fast(tmp_path: Path) -> None:
    db = DatabaseService(f"sqlite:///{tmp_path / 'missing' / 'usuarios.db'}")

    with pytest.raises(OperationalError):
        db.connect(fail_fast=True)


def test_single_connection_is_shared(database: DatabaseService) -> None:
    with database.engine.connect() as first:
        first_dbapi = first.connection.dbapi_connection
    with database.engine.connect() as second:
        second_dbapi = second.connection.dbapi_connection

    assert first_dbapi is second_dbapi


def test_statements_commit_on_their_own(database: DatabaseService) -> None:
    with pytest.raises(RuntimeError):
        with database.session() as session:
            UserRepository(session).add(UserSchema(nombre="Mario", correo="m@x.com"))
            raise RuntimeError("boom")

    with database.session() as session:
        count = session.execute(text("SELECT COUNT(*) FROM usuarios")).scalar_one()
    assert count == 1


def test_failing_update_keeps_interleaved_create(database: DatabaseService) -> None:
    service = UserService()

    with database.session() as creating:
        user = service.create_user(session=creating, nombre="Mario", correo="m@x.com")

        with pytest.raises(StoreError):
            with database.session() as updating:
                service.update_user(session=updating, user_id=str(user.id), nombre=None)

    with database.session() as session:
        users = UserRepository(session).list_all()
    assert [(u.id, u.nombre) for u in users] == [(user.id, "Mario")]


def test_failing_update_in_thread_keeps_concurrent_create(
    database: DatabaseService,
) -> None:
    service = UserService()
    created = threading.Event()
    failed = threading.Event()
    errors: list[Exception] = []

    def failing_update() -> None:
        created.wait(timeout=5)
        try:
            with database.session() as session:
                service.update_user(session=session, user_id="1", nombre=None)
        except StoreError as exc:
            errors.append(exc)
        finally:
            failed.set()

    worker = threading.Thread(target=failing_update)
    worker.start()
    with database.session() as session:
        user = service.create_user(session=session, nombre="Mario", correo="m@x.com")
        created.set()
        assert failed.wait(timeout=5)
    worker.join(timeout=5)

    assert len(errors) == 1
    with database.session() as session:
        assert [u.id for u in UserRepository(session).list_all()] == [user.id]
