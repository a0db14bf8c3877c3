"""Route definitions for public HTTP endpoints."""

from usuarios_api.api.routers.docs import router as docs_router
from usuarios_api.api.routers.users import router as users_router

__all__ = ["docs_router", "users_router"]
