"""Blueprints routes: CRUD over author-owned point collections.

- GET  /blueprints                          → 200, every blueprint
- GET  /blueprints/<author>                 → 200, or 404 if the author has none
- GET  /blueprints/<author>/<name>          → 200, or 404
- POST /blueprints                          → 201 with the created blueprint, 400 on duplicate/invalid body
- PUT  /blueprints/<author>/<name>/points   → 202, 404 if absent, 400 on invalid body

Every response uses the ``{code, message, data}`` envelope.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, request

from blueprints_backend.errors import (
    BlueprintNotFoundError,
    BlueprintValidationError,
    DuplicateBlueprintError,
    PointOrderConflictError,
)
from blueprints_backend.schemas import ApiResponse, NewBlueprintRequest, PointRequest, parse_payload
from blueprints_backend.services.blueprints_service import BlueprintsService


blueprints_bp = Blueprint("blueprints", __name__)


def _service() -> BlueprintsService:
    return current_app.extensions["blueprints_service"]


def _payload() -> Any:
    return request.get_json(silent=True)


@blueprints_bp.get("/blueprints")
def get_all():
    blueprints = _service().get_all_blueprints()
    return ApiResponse.success([bp.to_dict() for bp in blueprints]).to_response()


@blueprints_bp.get("/blueprints/<author>")
def by_author(author: str):
    try:
        blueprints = _service().get_blueprints_by_author(author)
    except BlueprintNotFoundError as e:
        return ApiResponse.not_found(e.message).to_response()
    return ApiResponse.success([bp.to_dict() for bp in blueprints]).to_response()


@blueprints_bp.get("/blueprints/<author>/<name>")
def by_author_and_name(author: str, name: str):
    try:
        bp = _service().get_blueprint(author, name)
    except BlueprintNotFoundError as e:
        return ApiResponse.not_found(e.message).to_response()
    return ApiResponse.success(bp.to_dict()).to_response()


@blueprints_bp.post("/blueprints")
def add():
    try:
        req = parse_payload(NewBlueprintRequest, _payload())
        bp = _service().add_new_blueprint(req.to_blueprint())
    except (BlueprintValidationError, DuplicateBlueprintError) as e:
        return ApiResponse.bad_request(e.message).to_response()
    return ApiResponse.created(bp.to_dict()).to_response()


@blueprints_bp.put("/blueprints/<author>/<name>/points")
def add_point(author: str, name: str):
    try:
        point = parse_payload(PointRequest, _payload())
        _service().add_point(author, name, point.x, point.y)
    except BlueprintValidationError as e:
        return ApiResponse.bad_request(e.message).to_response()
    except BlueprintNotFoundError as e:
        return ApiResponse.not_found(e.message).to_response()
    except PointOrderConflictError as e:
        return ApiResponse.conflict(e.message).to_response()
    return ApiResponse.accepted().to_response()
