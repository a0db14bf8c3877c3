from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

MARIO = {"nombre": "Mario", "correo": "m@x.com"}
ANA = {"nombre": "Ana", "correo": "a@x.com"}


def _create(client: TestClient, payload: dict[str, str]) -> dict:
    response = client.post("/api/usuarios", json=payload)
    assert response.status_code == 201
    return response.json()


def test_list_users_empty(client: TestClient) -> None:
    response = client.get("/api/usuarios")

    assert response.status_code == 200
    assert response.json() == []


def test_create_user_returns_store_assigned_id(client: TestClient) -> None:
    data = _create(client, MARIO)

    assert data["mensaje"] == "Usuario creado"
    assert data["usuario"]["nombre"] == "Mario"
    assert data["usuario"]["correo"] == "m@x.com"
    assert isinstance(data["usuario"]["id"], int)
    assert data["usuario"]["id"] > 0


def test_created_ids_are_distinct(client: TestClient) -> None:
    first = _create(client, MARIO)["usuario"]["id"]
    second = _create(client, ANA)["usuario"]["id"]

    assert second > first


def test_list_users_contains_created_users(client: TestClient) -> None:
    _create(client, MARIO)
    _create(client, ANA)

    users = client.get("/api/usuarios").json()

    assert [(u["nombre"], u["correo"]) for u in users] == [
        ("Mario", "m@x.com"),
        ("Ana", "a@x.com"),
    ]
    assert len({u["id"] for u in users}) == 2
    assert set(users[0]) == {"id", "nombre", "correo"}


def test_list_users_is_repeatable(client: TestClient) -> None:
    _create(client, MARIO)
    _create(client, ANA)

    first = client.get("/api/usuarios").json()
    second = client.get("/api/usuarios").json()

    assert first == second


def test_create_user_missing_correo_is_rejected(client: TestClient) -> None:
    _create(client, MARIO)
    before = client.get("/api/usuarios").json()

    response = client.post("/api/usuarios", json={"nombre": "Ana"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Los campos nombre y correo son obligatorios"}
    assert client.get("/api/usuarios").json() == before


def test_create_user_empty_fields_are_rejected(client: TestClient) -> None:
    response = client.post("/api/usuarios", json={"nombre": "", "correo": "a@x.com"})

    assert response.status_code == 400
    assert client.get("/api/usuarios").json() == []


def test_create_user_malformed_body_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/api/usuarios",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Cuerpo de la solicitud inválido"}


def test_update_user_renames(client: TestClient) -> None:
    user_id = _create(client, MARIO)["usuario"]["id"]

    response = client.put(f"/api/usuarios/{user_id}", json={"nombre": "Luis"})

    assert response.status_code == 200
    assert response.json() == {
        "mensaje": f"Usuario con ID {user_id} modificado.",
        "usuario": {"id": str(user_id), "nombre": "Luis"},
    }
    users = client.get("/api/usuarios").json()
    assert users == [{"id": user_id, "nombre": "Luis", "correo": "m@x.com"}]


def test_update_missing_user_still_reports_success(client: TestClient) -> None:
    response = client.put("/api/usuarios/999", json={"nombre": "Nadie"})

    assert response.status_code == 200
    assert response.json()["mensaje"] == "Usuario con ID 999 modificado."
    assert client.get("/api/usuarios").json() == []


def test_delete_user_twice_reports_success_both_times(client: TestClient) -> None:
    user_id = _create(client, MARIO)["usuario"]["id"]

    first = client.delete(f"/api/usuarios/{user_id}")
    second = client.delete(f"/api/usuarios/{user_id}")

    expected = {"mensaje": f"Usuario con ID {user_id} eliminado."}
    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json() == expected
    assert second.json() == expected
    assert client.get("/api/usuarios").json() == []


def test_delete_only_removes_target(client: TestClient) -> None:
    mario = _create(client, MARIO)["usuario"]["id"]
    ana = _create(client, ANA)["usuario"]["id"]

    client.delete(f"/api/usuarios/{mario}")

    assert [u["id"] for u in client.get("/api/usuarios").json()] == [ana]


def test_update_without_body_is_treated_as_empty(client: TestClient) -> None:
    response = client.put("/api/usuarios/999")

    assert response.status_code == 200
    assert response.json() == {
        "mensaje": "Usuario con ID 999 modificado.",
        "usuario": {"id": "999", "nombre": None},
    }
