"""User CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from usuarios_api.api.dependencies import get_user_service
from usuarios_api.api.models import (
    ErrorResponse,
    UserCreatedResponse,
    UserCreateRequest,
    UserDeletedResponse,
    UserResponse,
    UserUpdatedResponse,
    UserUpdateRequest,
    UserUpdateSummary,
)
from usuarios_api.api.openapi import sample_request
from usuarios_api.api.services import MissingFieldsError, StoreError, UserService
from usuarios_api.database import get_session

router = APIRouter(prefix="/api/usuarios", tags=["usuarios"])

MISSING_FIELDS_DETAIL = "Los campos nombre y correo son obligatorios"
STORE_ERROR_DETAIL = "Error interno del servidor"

_STORE_ERROR_RESPONSE = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ErrorResponse,
        "description": "Error al acceder a la base de datos",
    }
}


def _store_failure() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=STORE_ERROR_DETAIL
    )


@router.get(
    "",
    response_model=list[UserResponse],
    summary="Obtener todos los usuarios",
    response_description="Lista de usuarios",
    responses=_STORE_ERROR_RESPONSE,
    openapi_extra=sample_request("GET", "/api/usuarios"),
)
def list_users(
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    try:
        users = user_service.list_users(session=session)
    except StoreError as exc:
        raise _store_failure() from exc
    return [UserResponse.model_validate(user) for user in users]


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear nuevo usuario",
    response_description="Usuario creado exitosamente",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Faltan campos obligatorios",
        },
        **_STORE_ERROR_RESPONSE,
    },
    openapi_extra=sample_request(
        "POST",
        "/api/usuarios",
        {"nombre": "Juan Pérez", "correo": "juan@example.com"},
    ),
)
def create_user(
    payload: UserCreateRequest,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    """Create a user; both ``nombre`` and ``correo`` must be non-empty."""

    try:
        user = user_service.create_user(
            session=session, nombre=payload.nombre, correo=payload.correo
        )
    except MissingFieldsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS_DETAIL
        ) from exc
    except StoreError as exc:
        raise _store_failure() from exc

    return UserCreatedResponse(
        mensaje="Usuario creado", usuario=UserResponse.model_validate(user)
    )


@router.put(
    "/{id}",
    response_model=UserUpdatedResponse,
    summary="Modificar usuario existente",
    response_description="Usuario modificado exitosamente",
    responses=_STORE_ERROR_RESPONSE,
    openapi_extra=sample_request("PUT", "/api/usuarios/1", {"nombre": "Luis Ramírez"}),
)
def update_user(
    id: str,  # noqa: A002
    payload: UserUpdateRequest | None = None,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserUpdatedResponse:
    """Rename a user.

    Reports success even when no row matched ``id``. A missing body is
    treated as an empty one.
    """

    nombre = payload.nombre if payload is not None else None
    try:
        user_service.update_user(session=session, user_id=id, nombre=nombre)
    except StoreError as exc:
        raise _store_failure() from exc

    return UserUpdatedResponse(
        mensaje=f"Usuario con ID {id} modificado.",
        usuario=UserUpdateSummary(id=id, nombre=nombre),
    )


@router.delete(
    "/{id}",
    response_model=UserDeletedResponse,
    summary="Eliminar usuario por ID",
    response_description="Usuario eliminado",
    responses=_STORE_ERROR_RESPONSE,
    openapi_extra=sample_request("DELETE", "/api/usuarios/1"),
)
def delete_user(
    id: str,  # noqa: A002
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserDeletedResponse:
    """Delete a user; reports success even when no row matched ``id``."""

    try:
        user_service.delete_user(session=session, user_id=id)
    except StoreError as exc:
        raise _store_failure() from exc

    return UserDeletedResponse(mensaje=f"Usuario con ID {id} eliminado.")
