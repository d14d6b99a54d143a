"""Domain value objects: Point and Blueprint.

A Blueprint is identified by its ``(author, name)`` pair and owns an ordered
sequence of points. The order of ``points`` is the drawing order and is
preserved exactly through persistence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

# Column limits shared by request validation and the relational schema
MAX_NAME_LENGTH = 255
MIN_COORDINATE = -(2**31)
MAX_COORDINATE = 2**31 - 1


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Blueprint:
    author: str
    name: str
    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of points but always store an immutable tuple
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    @property
    def key(self) -> Tuple[str, str]:
        return (self.author, self.name)

    def with_point(self, point: Point) -> "Blueprint":
        """Return a copy with ``point`` appended at the end."""
        return Blueprint(self.author, self.name, self.points + (point,))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "author": self.author,
            "name": self.name,
            "points": [p.to_dict() for p in self.points],
        }
