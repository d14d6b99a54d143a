"""Tests for BlueprintsService delegation and error propagation."""

from __future__ import annotations

from unittest.mock import create_autospec

import pytest

from blueprints_backend.errors import BlueprintNotFoundError, DuplicateBlueprintError
from blueprints_backend.models import Blueprint, Point
from blueprints_backend.persistence.base import BlueprintPersistence
from blueprints_backend.services.blueprints_service import BlueprintsService


@pytest.fixture
def store():
    return create_autospec(BlueprintPersistence, instance=True)


@pytest.fixture
def service(store):
    return BlueprintsService(store)


def test_reads_delegate_to_store(service, store):
    bp = Blueprint("alice", "house", (Point(0, 0),))
    store.get_all_blueprints.return_value = [bp]
    store.get_blueprints_by_author.return_value = [bp]
    store.get_blueprint.return_value = bp

    assert service.get_all_blueprints() == [bp]
    assert service.get_blueprints_by_author("alice") == [bp]
    assert service.get_blueprint("alice", "house") is bp
    store.get_blueprints_by_author.assert_called_once_with("alice")
    store.get_blueprint.assert_called_once_with("alice", "house")


def test_add_new_blueprint_saves_and_returns_it(service, store):
    bp = Blueprint("alice", "house")

    assert service.add_new_blueprint(bp) is bp
    store.save_blueprint.assert_called_once_with(bp)


def test_duplicate_error_propagates_unchanged(service, store):
    err = DuplicateBlueprintError("alice", "house")
    store.save_blueprint.side_effect = err

    with pytest.raises(DuplicateBlueprintError) as exc:
        service.add_new_blueprint(Blueprint("alice", "house"))

    assert exc.value is err


def test_add_point_delegates(service, store):
    service.add_point("alice", "house", 3, 4)

    store.add_point.assert_called_once_with("alice", "house", 3, 4)


def test_not_found_propagates_unchanged(service, store):
    store.add_point.side_effect = BlueprintNotFoundError.for_blueprint("alice", "garage")
    store.get_blueprints_by_author.side_effect = BlueprintNotFoundError.for_author("bob")

    with pytest.raises(BlueprintNotFoundError, match="alice/garage"):
        service.add_point("alice", "garage", 1, 1)
    with pytest.raises(BlueprintNotFoundError, match="No blueprints for author: bob"):
        service.get_blueprints_by_author("bob")


def test_add_new_blueprint_logs_the_save(service, caplog):
    with caplog.at_level("INFO"):
        service.add_new_blueprint(Blueprint("alice", "house", (Point(0, 0), Point(1, 1))))

    assert "Saved blueprint alice/house with 2 points" in caplog.text
