"""BlueprintsService: thin orchestration over a BlueprintPersistence.

Each operation delegates to the store and lets its typed errors
(``BlueprintNotFoundError``, ``DuplicateBlueprintError``, ...) propagate
unchanged to the caller.
"""

from __future__ import annotations

import logging
from typing import List

from blueprints_backend.errors import BlueprintNotFoundError, DuplicateBlueprintError
from blueprints_backend.models import Blueprint
from blueprints_backend.persistence.base import BlueprintPersistence


class BlueprintsService:
    def __init__(self, persistence: BlueprintPersistence):
        self.persistence = persistence

    def get_all_blueprints(self) -> List[Blueprint]:
        return self.persistence.get_all_blueprints()

    def get_blueprints_by_author(self, author: str) -> List[Blueprint]:
        return self.persistence.get_blueprints_by_author(author)

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        return self.persistence.get_blueprint(author, name)

    def add_new_blueprint(self, bp: Blueprint) -> Blueprint:
        try:
            self.persistence.save_blueprint(bp)
        except DuplicateBlueprintError:
            logging.warning("Rejected duplicate blueprint %s/%s", bp.author, bp.name)
            raise
        logging.info("Saved blueprint %s/%s with %d points", bp.author, bp.name, len(bp.points))
        return bp

    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        try:
            self.persistence.add_point(author, name, x, y)
        except BlueprintNotFoundError:
            logging.warning("Cannot append point, blueprint %s/%s not found", author, name)
            raise
        logging.info("Appended point (%s, %s) to %s/%s", x, y, author, name)
