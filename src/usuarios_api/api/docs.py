"""HTML shell embedding the RapiDoc viewer."""

from __future__ import annotations

from fastapi.responses import HTMLResponse

RAPIDOC_JS_URL = "https://unpkg.com/rapidoc/dist/rapidoc-min.js"


def get_rapidoc_html(
    *,
    openapi_url: str,
    title: str,
    rapidoc_js_url: str = RAPIDOC_JS_URL,
) -> HTMLResponse:
    """Return a page rendering the document at ``openapi_url`` with RapiDoc."""

    html = f"""<!doctype html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Documentación {title} - RapiDoc</title>
    <script type="module" src="{rapidoc_js_url}"></script>
  </head>
  <body>
    <rapi-doc
      spec-url="{openapi_url}"
      theme="light"
      render-style="focused"
      show-header="true"
      heading-text="{title}"
    ></rapi-doc>
  </body>
</html>
"""
    return HTMLResponse(html)
