"""Request/response schemas for API endpoints.

Holds Pydantic models to validate input payloads (create blueprint,
append point) and the ``ApiResponse`` envelope ``{code, message, data}``
every endpoint returns. This keeps contracts explicit and centralized.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Tuple

from flask import Response, jsonify
from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from blueprints_backend.errors import BlueprintValidationError
from blueprints_backend.models import MAX_COORDINATE, MAX_NAME_LENGTH, MIN_COORDINATE, Blueprint, Point


# Booleans and numeric strings are rejected, and values must fit a 32-bit column
Coordinate = Annotated[StrictInt, Field(ge=MIN_COORDINATE, le=MAX_COORDINATE)]
BoundedName = Annotated[str, Field(max_length=MAX_NAME_LENGTH)]


class PointRequest(BaseModel):
    x: Coordinate
    y: Coordinate

    def to_point(self) -> Point:
        return Point(self.x, self.y)


class NewBlueprintRequest(BaseModel):
    author: BoundedName
    name: BoundedName
    points: Optional[List[PointRequest]] = None

    @field_validator("author")
    @classmethod
    def _author_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Author cannot be empty")
        return v

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v

    def to_blueprint(self) -> Blueprint:
        return Blueprint(self.author, self.name, tuple(p.to_point() for p in self.points or []))


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for err in exc.errors():
        # Messages raised by our own validators are passed through verbatim
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error is not None:
            messages.append(str(ctx_error))
            continue
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(messages)


def parse_payload(model: type, payload: Any):
    """Validate a decoded JSON body against ``model``.

    Raises ``BlueprintValidationError`` with a readable message on failure.
    """
    if not isinstance(payload, dict):
        raise BlueprintValidationError("Request body must be a JSON object.")
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise BlueprintValidationError(_format_validation_error(e)) from e


class ApiResponse(BaseModel):
    code: int
    message: str
    data: Any = None

    @classmethod
    def success(cls, data: Any) -> "ApiResponse":
        return cls(code=200, message="OK", data=data)

    @classmethod
    def created(cls, data: Any) -> "ApiResponse":
        return cls(code=201, message="Created", data=data)

    @classmethod
    def accepted(cls) -> "ApiResponse":
        return cls(code=202, message="Accepted")

    @classmethod
    def bad_request(cls, message: str) -> "ApiResponse":
        return cls(code=400, message=message)

    @classmethod
    def not_found(cls, message: str) -> "ApiResponse":
        return cls(code=404, message=message)

    @classmethod
    def conflict(cls, message: str) -> "ApiResponse":
        return cls(code=409, message=message)

    @classmethod
    def internal_error(cls, message: str = "Internal server error") -> "ApiResponse":
        return cls(code=500, message=message)

    @classmethod
    def error(cls, code: int, message: str) -> "ApiResponse":
        return cls(code=code, message=message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}

    def to_response(self) -> Tuple[Response, int]:
        """Flask view return value: JSON envelope plus matching status code."""
        return jsonify(self.to_dict()), self.code
