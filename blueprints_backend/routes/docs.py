"""Docs routes: GET /docs (Swagger UI) and /openapi.yaml (API document)

Serves the OpenAPI YAML shipped inside the package and a Swagger UI page
that renders it.
"""

from __future__ import annotations

import os

from flask import Blueprint, Response, request


docs_bp = Blueprint("docs", __name__)

SWAGGER_UI_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Blueprints API</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css" />
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>SwaggerUIBundle({url: "%(doc_url)s", dom_id: "#swagger-ui"});</script>
</body>
</html>
"""


def _openapi_path() -> str:
    # blueprints_backend/routes/docs.py → blueprints_backend/docs/openapi.yaml
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "docs", "openapi.yaml"))


@docs_bp.get("/openapi.yaml")
def openapi_yaml() -> Response:
    path = _openapi_path()
    if not os.path.exists(path):
        return Response("openapi.yaml not found", status=404)
    with open(path, "rb") as f:
        data = f.read()
    return Response(data, mimetype="text/yaml")


@docs_bp.get("/docs")
def swagger_ui() -> Response:
    html = SWAGGER_UI_PAGE % {"doc_url": request.script_root + "/openapi.yaml"}
    return Response(html, mimetype="text/html")
