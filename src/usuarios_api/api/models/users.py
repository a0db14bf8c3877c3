"""Pydantic models for the ``/api/usuarios`` endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Stored user as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(examples=[1])
    nombre: str = Field(examples=["Mario"])
    correo: str = Field(examples=["m@x.com"])


class UserCreateRequest(BaseModel):
    """Payload for creating a user.

    Fields are optional at the schema level so that missing values reach the
    service, which answers them with 400 rather than FastAPI's 422.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"nombre": "Juan Pérez", "correo": "juan@example.com"}}
    )

    nombre: str | None = None
    correo: str | None = None


class UserCreatedResponse(BaseModel):
    mensaje: str = Field(examples=["Usuario creado"])
    usuario: UserResponse


class UserUpdateRequest(BaseModel):
    """Payload for renaming a user."""

    model_config = ConfigDict(json_schema_extra={"example": {"nombre": "Luis Ramírez"}})

    nombre: str | None = None


class UserUpdateSummary(BaseModel):
    """Echo of the submitted update; ``id`` is the path value as received."""

    id: str
    nombre: str | None = None


class UserUpdatedResponse(BaseModel):
    mensaje: str = Field(examples=["Usuario con ID 1 modificado."])
    usuario: UserUpdateSummary


class UserDeletedResponse(BaseModel):
    mensaje: str = Field(examples=["Usuario con ID 1 eliminado."])


class ErrorResponse(BaseModel):
    detail: str
