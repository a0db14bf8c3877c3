"""Persistence repositories."""

from usuarios_api.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
