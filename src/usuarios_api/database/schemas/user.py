"""User database schema."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from usuarios_api.database.base import BaseSchema


class UserSchema(BaseSchema):
    """SQLAlchemy model mirroring the externally provisioned ``usuarios`` table."""

    __tablename__ = "usuarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    correo: Mapped[str] = mapped_column(String(255), nullable=False)
