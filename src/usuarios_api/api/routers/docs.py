"""Interactive documentation page."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from usuarios_api.api.docs import get_rapidoc_html
from usuarios_api.api.openapi import API_TITLE

router = APIRouter(include_in_schema=False)


@router.get("/docs", response_class=HTMLResponse)
def rapidoc(request: Request) -> HTMLResponse:
    """Serve the RapiDoc viewer pointed at the application's schema."""

    return get_rapidoc_html(openapi_url=request.app.openapi_url, title=API_TITLE)
