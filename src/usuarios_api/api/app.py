"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from usuarios_api.api.openapi import API_TITLE, API_VERSION, install_openapi
from usuarios_api.api.routers import docs_router, users_router
from usuarios_api.database import DatabaseService
from usuarios_api.logging_config import configure_logging
from usuarios_api.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

INVALID_BODY_DETAIL = "Cuerpo de la solicitud inválido"


async def _invalid_body_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": INVALID_BODY_DETAIL},
    )


def create_api(
    *,
    database: DatabaseService | None = None,
    settings: BackendSettings | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    ``database`` is created from the settings when omitted. It is connected
    on startup and exposed to handlers as ``app.state.database``.
    """
    config = settings or get_settings()
    configure_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = database or DatabaseService(settings=config)
        db.connect(fail_fast=config.database_fail_fast)
        app.state.database = db
        app.openapi()
        logger.info("Documentation available at %s/docs", config.public_url.rstrip("/"))
        try:
            yield
        finally:
            db.dispose()

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        openapi_url="/openapi.json",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, _invalid_body_handler)
    app.include_router(users_router)
    app.include_router(docs_router)
    install_openapi(app, config)
    return app
