"""OpenAPI document assembly with per-language request samples.

Routes attach an ``x-sample-request`` marker through :func:`sample_request`.
When the document is built, each marker is rendered into the
``x-codeSamples`` extension understood by RapiDoc, using the public server URL
from the settings.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from usuarios_api.settings import BackendSettings, get_settings

API_TITLE = "API de Usuarios"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Documentación de la API usando RapiDoc"

SAMPLE_REQUEST_KEY = "x-sample-request"
CODE_SAMPLES_KEY = "x-codeSamples"


def sample_request(
    method: str, path: str, body: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Return ``openapi_extra`` declaring the example call for a route.

    ``path`` is a concrete example path, e.g. ``/api/usuarios/1``.
    """

    request: dict[str, Any] = {"method": method.upper(), "path": path}
    if body is not None:
        request["body"] = body
    return {SAMPLE_REQUEST_KEY: request}


def _curl(method: str, url: str, body: dict[str, Any] | None) -> str:
    if method == "GET":
        return f"curl {url}\n"
    if body is None:
        return f"curl -X {method} {url}\n"
    return (
        f"curl -X {method} {url} \\\n"
        '-H "Content-Type: application/json" \\\n'
        f"-d '{json.dumps(body, ensure_ascii=False)}'\n"
    )


def _fetch(method: str, url: str, body: dict[str, Any] | None) -> str:
    if method == "GET":
        return (
            f"fetch('{url}')\n"
            "  .then(res => res.json())\n"
            "  .then(console.log);\n"
        )
    options = [f"  method: '{method}'"]
    if body is not None:
        options.append("  headers: { 'Content-Type': 'application/json' }")
        options.append(f"  body: JSON.stringify({json.dumps(body, ensure_ascii=False)})")
    return (
        f"fetch('{url}', {{\n"
        + ",\n".join(options)
        + "\n}).then(res => res.json()).then(console.log);\n"
    )


def _requests(method: str, url: str, body: dict[str, Any] | None) -> str:
    call = f"requests.{method.lower()}('{url}'"
    if body is not None:
        call += f", json={body!r}"
    return f"import requests\nresponse = {call})\nprint(response.json())\n"


def _axios(method: str, url: str, body: dict[str, Any] | None) -> str:
    args = f"'{url}'"
    if body is not None:
        args += f", {json.dumps(body, ensure_ascii=False)}"
    return (
        "const axios = require('axios');\n"
        f"axios.{method.lower()}({args})\n"
        "     .then(res => console.log(res.data));\n"
    )


def render_code_samples(
    request: dict[str, Any], server_url: str
) -> list[dict[str, str]]:
    """Render a sample request as cURL, fetch, requests and axios snippets."""

    method = request["method"]
    url = server_url.rstrip("/") + request["path"]
    body = request.get("body")
    return [
        {"lang": "cURL", "source": _curl(method, url, body)},
        {"lang": "JavaScript", "label": "fetch", "source": _fetch(method, url, body)},
        {"lang": "Python", "label": "requests", "source": _requests(method, url, body)},
        {"lang": "Node.js", "label": "axios", "source": _axios(method, url, body)},
    ]


def build_openapi(app: FastAPI, server_url: str) -> dict[str, Any]:
    """Generate the OpenAPI document for ``app`` with rendered code samples."""

    schema = get_openapi(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        routes=app.routes,
        servers=[{"url": server_url}],
    )
    for path_item in schema.get("paths", {}).values():
        for operation in path_item.values():
            _replace_validation_response(operation)
            request = operation.pop(SAMPLE_REQUEST_KEY, None)
            if request is not None:
                operation[CODE_SAMPLES_KEY] = render_code_samples(request, server_url)
    component_schemas = schema.get("components", {}).get("schemas", {})
    component_schemas.pop("HTTPValidationError", None)
    component_schemas.pop("ValidationError", None)
    return schema


def _replace_validation_response(operation: dict[str, Any]) -> None:
    # Request validation failures are answered with 400, not FastAPI's 422.
    responses = operation.get("responses", {})
    if responses.pop("422", None) is None or "requestBody" not in operation:
        return
    responses.setdefault(
        "400",
        {
            "description": "Cuerpo de la solicitud inválido",
            "content": {
                "application/json": {
                    "schema": {"$ref": "#/components/schemas/ErrorResponse"}
                }
            },
        },
    )


def install_openapi(app: FastAPI, settings: BackendSettings | None = None) -> None:
    """Replace ``app.openapi`` with a builder that caches its first result."""

    config = settings or get_settings()

    def openapi() -> dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi(app, config.public_url)
        return app.openapi_schema

    app.openapi = openapi  # type: ignore[method-assign]


__all__ = [
    "API_TITLE",
    "build_openapi",
    "install_openapi",
    "render_code_samples",
    "sample_request",
]
