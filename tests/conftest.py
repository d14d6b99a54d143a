"""Shared fixtures: temporary SQLite stores and a Flask test client."""

from __future__ import annotations

import pytest

from blueprints_backend import create_app
from blueprints_backend.config import Config
from blueprints_backend.persistence import InMemoryBlueprintPersistence, SqlBlueprintPersistence


@pytest.fixture
def sql_persistence(tmp_path):
    """SQL adapter over a fresh SQLite file with the schema created."""

    store = SqlBlueprintPersistence.from_url(f"sqlite:///{tmp_path / 'blueprints.db'}")
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture(params=["sql", "memory"])
def persistence(request, tmp_path):
    """Each adapter in turn, for tests of the shared persistence contract."""

    if request.param == "memory":
        yield InMemoryBlueprintPersistence()
        return
    store = SqlBlueprintPersistence.from_url(f"sqlite:///{tmp_path / 'contract.db'}")
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture
def test_config(tmp_path):
    class TestConfig(Config):
        BLUEPRINTS_ENV = "test"
        STORE = "sql"
        DATABASE_URL = f"sqlite:///{tmp_path / 'app.db'}"
        API_PREFIX = ""
        LOG_LEVEL = "WARNING"

    return TestConfig


@pytest.fixture
def app(test_config):
    app = create_app(test_config)
    app.config.update(TESTING=True)
    yield app
    app.extensions["blueprints_persistence"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
