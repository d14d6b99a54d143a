"""Contract tests run against every BlueprintPersistence adapter."""

from __future__ import annotations

import pytest

from blueprints_backend.errors import BlueprintNotFoundError, DuplicateBlueprintError
from blueprints_backend.models import Blueprint, Point


HOUSE = Blueprint("alice", "house", (Point(0, 0), Point(1, 1), Point(5, 2)))


def test_save_then_get_round_trips(persistence):
    persistence.save_blueprint(HOUSE)

    assert persistence.get_blueprint("alice", "house") == HOUSE


def test_save_with_no_points(persistence):
    persistence.save_blueprint(Blueprint("alice", "empty"))

    assert persistence.get_blueprint("alice", "empty").points == ()


def test_duplicate_save_fails_and_keeps_first(persistence):
    persistence.save_blueprint(HOUSE)

    with pytest.raises(DuplicateBlueprintError) as exc:
        persistence.save_blueprint(Blueprint("alice", "house", (Point(9, 9),)))

    assert "alice/house" in str(exc.value)
    assert persistence.get_blueprint("alice", "house") == HOUSE


def test_get_missing_blueprint(persistence):
    with pytest.raises(BlueprintNotFoundError) as exc:
        persistence.get_blueprint("nobody", "nothing")

    assert exc.value.message == "Blueprint not found: nobody/nothing"


def test_add_point_appends_in_call_order(persistence):
    persistence.save_blueprint(HOUSE)

    for i in range(4):
        persistence.add_point("alice", "house", 10 + i, -i)

    points = persistence.get_blueprint("alice", "house").points
    assert len(points) == len(HOUSE.points) + 4
    assert points[: len(HOUSE.points)] == HOUSE.points
    assert points[len(HOUSE.points):] == (Point(10, 0), Point(11, -1), Point(12, -2), Point(13, -3))


def test_add_point_to_empty_blueprint(persistence):
    persistence.save_blueprint(Blueprint("alice", "empty"))

    persistence.add_point("alice", "empty", 7, 8)

    assert persistence.get_blueprint("alice", "empty").points == (Point(7, 8),)


def test_add_point_to_missing_blueprint_changes_nothing(persistence):
    persistence.save_blueprint(HOUSE)

    with pytest.raises(BlueprintNotFoundError):
        persistence.add_point("alice", "garage", 1, 1)

    assert persistence.get_all_blueprints() == [HOUSE]


def test_by_author_returns_exactly_their_blueprints(persistence):
    shed = Blueprint("alice", "shed", (Point(2, 3),))
    other = Blueprint("bob", "house", (Point(4, 4),))
    for bp in (HOUSE, shed, other):
        persistence.save_blueprint(bp)

    found = persistence.get_blueprints_by_author("alice")

    assert len(found) == 2
    assert set(found) == {HOUSE, shed}


def test_by_author_with_none_fails(persistence):
    persistence.save_blueprint(HOUSE)

    with pytest.raises(BlueprintNotFoundError) as exc:
        persistence.get_blueprints_by_author("bob")

    assert exc.value.message == "No blueprints for author: bob"


def test_get_all_empty_is_valid(persistence):
    assert persistence.get_all_blueprints() == []


def test_get_all_returns_every_blueprint(persistence):
    other = Blueprint("bob", "tower", (Point(1, 0), Point(0, 1)))
    persistence.save_blueprint(HOUSE)
    persistence.save_blueprint(other)

    assert persistence.get_all_blueprints() == [HOUSE, other]


def test_delete_removes_blueprint(persistence):
    persistence.save_blueprint(HOUSE)

    persistence.delete_blueprint("alice", "house")

    with pytest.raises(BlueprintNotFoundError):
        persistence.get_blueprint("alice", "house")
    assert persistence.get_all_blueprints() == []


def test_delete_missing_blueprint(persistence):
    with pytest.raises(BlueprintNotFoundError):
        persistence.delete_blueprint("alice", "house")


def test_name_can_be_reused_after_delete(persistence):
    persistence.save_blueprint(HOUSE)
    persistence.delete_blueprint("alice", "house")

    persistence.save_blueprint(Blueprint("alice", "house", (Point(3, 3),)))

    assert persistence.get_blueprint("alice", "house").points == (Point(3, 3),)
