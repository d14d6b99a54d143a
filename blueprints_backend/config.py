"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the data path, database URL and
server settings. This keeps the rest of the codebase decoupled from
direct env access.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    # Base
    BLUEPRINTS_ENV = os.getenv("BLUEPRINTS_ENV", "dev")
    DATA_DIR = os.getenv("BLUEPRINTS_DATA_DIR", os.path.abspath(os.path.join(os.getcwd(), "data")))

    # Storage: "sql" uses DATABASE_URL, "memory" keeps everything in-process
    STORE = os.getenv("BLUEPRINTS_STORE", "sql")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///" + os.path.join(DATA_DIR, "blueprints.db"))
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_ECHO = _env_bool("DB_ECHO")

    # HTTP
    API_PREFIX = os.getenv("API_PREFIX", "")
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "5000"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def ensure_data_dirs(cfg: Config = Config) -> None:
    """Ensure the data directory exists when a local SQLite file lives there."""
    if cfg.DATABASE_URL.startswith("sqlite:///") and not cfg.DATABASE_URL.endswith(":memory:"):
        db_path = cfg.DATABASE_URL[len("sqlite:///"):]
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
