"""Error taxonomy shared by the persistence, service and API layers.

- ``DuplicateBlueprintError``: create collided with an existing (author, name).
- ``BlueprintNotFoundError``: lookup, append or delete targeted nothing.
- ``PointOrderConflictError``: two appends raced for the same order key.
- ``BlueprintValidationError``: malformed request payload.
"""

from __future__ import annotations

from typing import Optional


class BlueprintError(Exception):
    """Base class for every error raised by this package."""


class BlueprintPersistenceError(BlueprintError):
    """A store operation failed."""

    def __init__(self, message: str, *, author: Optional[str] = None, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.author = author
        self.name = name


class DuplicateBlueprintError(BlueprintPersistenceError):
    def __init__(self, author: str, name: str) -> None:
        super().__init__(f"Blueprint already exists: {author}/{name}", author=author, name=name)


class BlueprintNotFoundError(BlueprintPersistenceError):
    @classmethod
    def for_blueprint(cls, author: str, name: str) -> "BlueprintNotFoundError":
        return cls(f"Blueprint not found: {author}/{name}", author=author, name=name)

    @classmethod
    def for_author(cls, author: str) -> "BlueprintNotFoundError":
        return cls(f"No blueprints for author: {author}", author=author)


class PointOrderConflictError(BlueprintPersistenceError):
    def __init__(self, author: str, name: str) -> None:
        super().__init__(
            f"Concurrent point append conflict on blueprint: {author}/{name}",
            author=author,
            name=name,
        )


class BlueprintValidationError(BlueprintError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
