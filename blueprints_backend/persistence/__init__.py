"""Persistence package: the storage port and its adapters.

- ``BlueprintPersistence``: abstract port used by the service layer.
- ``SqlBlueprintPersistence``: SQLAlchemy-backed relational adapter.
- ``InMemoryBlueprintPersistence``: process-local adapter.
"""

from __future__ import annotations

import logging

from blueprints_backend.config import Config, ensure_data_dirs
from blueprints_backend.persistence.base import BlueprintPersistence
from blueprints_backend.persistence.memory_persistence import InMemoryBlueprintPersistence
from blueprints_backend.persistence.sql_persistence import SqlBlueprintPersistence


def build_persistence(cfg: Config = Config) -> BlueprintPersistence:
    """Create the adapter selected by ``cfg.STORE``."""
    store = (cfg.STORE or "sql").lower()
    if store == "memory":
        logging.info("Using in-memory blueprint store")
        return InMemoryBlueprintPersistence()
    if store != "sql":
        raise ValueError(f"Unknown BLUEPRINTS_STORE: {cfg.STORE!r} (expected 'sql' or 'memory')")

    ensure_data_dirs(cfg)
    persistence = SqlBlueprintPersistence.from_url(
        cfg.DATABASE_URL, pool_size=cfg.DB_POOL_SIZE, echo=cfg.DB_ECHO
    )
    persistence.create_schema()
    logging.info("Using SQL blueprint store (%s)", persistence.engine.url.render_as_string(hide_password=True))
    return persistence


__all__ = [
    "BlueprintPersistence",
    "InMemoryBlueprintPersistence",
    "SqlBlueprintPersistence",
    "build_persistence",
]
