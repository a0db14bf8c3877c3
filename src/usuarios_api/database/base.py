"""Declarative base shared by the table declarations."""

from sqlalchemy.orm import DeclarativeBase


class BaseSchema(DeclarativeBase):
    """Base class whose metadata holds the ``usuarios`` table."""
