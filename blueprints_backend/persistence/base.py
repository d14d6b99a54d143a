"""BlueprintPersistence: the storage port used by the service layer.

Adapters implement these six operations; callers never see rows, sessions
or connections.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from blueprints_backend.models import Blueprint


class BlueprintPersistence(ABC):
    @abstractmethod
    def save_blueprint(self, bp: Blueprint) -> None:
        """Store a new blueprint with its points.

        Raises ``DuplicateBlueprintError`` if (author, name) is taken.
        """

    @abstractmethod
    def get_blueprint(self, author: str, name: str) -> Blueprint:
        """Raises ``BlueprintNotFoundError`` if absent."""

    @abstractmethod
    def get_blueprints_by_author(self, author: str) -> List[Blueprint]:
        """Raises ``BlueprintNotFoundError`` if the author has none."""

    @abstractmethod
    def get_all_blueprints(self) -> List[Blueprint]:
        ...

    @abstractmethod
    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        """Append a point after every existing point of the blueprint."""

    @abstractmethod
    def delete_blueprint(self, author: str, name: str) -> None:
        """Remove the blueprint and all of its points."""
