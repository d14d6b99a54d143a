"""InMemoryBlueprintPersistence: dictionary-backed adapter for dev and tests.

Keeps blueprints keyed by (author, name) in insertion order. Nothing
survives a restart.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Tuple

from blueprints_backend.errors import BlueprintNotFoundError, DuplicateBlueprintError
from blueprints_backend.models import Blueprint, Point
from blueprints_backend.persistence.base import BlueprintPersistence


class InMemoryBlueprintPersistence(BlueprintPersistence):
    def __init__(self) -> None:
        self._blueprints: Dict[Tuple[str, str], Blueprint] = {}
        self._lock = threading.Lock()

    def save_blueprint(self, bp: Blueprint) -> None:
        with self._lock:
            if bp.key in self._blueprints:
                raise DuplicateBlueprintError(bp.author, bp.name)
            self._blueprints[bp.key] = bp

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        with self._lock:
            bp = self._blueprints.get((author, name))
        if bp is None:
            raise BlueprintNotFoundError.for_blueprint(author, name)
        return bp

    def get_blueprints_by_author(self, author: str) -> List[Blueprint]:
        with self._lock:
            found = [bp for bp in self._blueprints.values() if bp.author == author]
        if not found:
            raise BlueprintNotFoundError.for_author(author)
        return found

    def get_all_blueprints(self) -> List[Blueprint]:
        with self._lock:
            return list(self._blueprints.values())

    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        with self._lock:
            bp = self._blueprints.get((author, name))
            if bp is None:
                raise BlueprintNotFoundError.for_blueprint(author, name)
            self._blueprints[bp.key] = bp.with_point(Point(x, y))

    def delete_blueprint(self, author: str, name: str) -> None:
        with self._lock:
            if self._blueprints.pop((author, name), None) is None:
                raise BlueprintNotFoundError.for_blueprint(author, name)
