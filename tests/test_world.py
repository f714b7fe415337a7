"""Tests for locations and world construction."""

import pytest

from wanderer.engine.errors import (
    DuplicateLocationError,
    NoSuchDirectionError,
    UnknownLocationError,
)
from wanderer.engine.world import Location, LocationRecord, World, build_world


def test_connect_round_trip():
    """A connection, once made, is returned for its direction."""
    a = Location("A")
    b = Location("B")
    a.connect("north", b)
    assert a.get_connection("north") is b


def test_connections_are_directed():
    a = Location("A")
    b = Location("B")
    a.connect("north", b)
    assert b.get_connection("south") is None
    assert b.directions == ()


def test_connect_overwrites_direction():
    """Connecting a direction twice keeps the last target."""
    a, b, c = Location("A"), Location("B"), Location("C")
    a.connect("east", b)
    a.connect("east", c)
    assert a.get_connection("east") is c
    assert a.directions == ("east",)


def test_missing_direction():
    a = Location("A")
    assert a.get_connection("up") is None
    with pytest.raises(NoSuchDirectionError):
        a.connection("up")


def test_directions_keep_insertion_order():
    a = Location("A")
    for direction in ("west", "north", "down"):
        a.connect(direction, Location(direction))
    assert a.directions == ("west", "north", "down")


def test_build_resolves_forward_references():
    """Targets may be declared before their own record."""
    records = [
        LocationRecord("Gate", connections=(("in", "Yard"),)),
        LocationRecord("Yard", connections=(("out", "Gate"), ("up", "Wall"))),
        LocationRecord("Wall"),
    ]
    world = World.build(records, "Gate")
    gate = world.find_location("Gate")
    yard = world.find_location("Yard")
    assert gate.get_connection("in") is yard
    assert yard.get_connection("up") is world.find_location("Wall")


def test_every_target_resolves(dungeon: World):
    for location in dungeon:
        for target in location.connections.values():
            assert dungeon.find_location(target.name) is target


def test_build_rejects_unknown_target():
    records = [LocationRecord("Start", connections=(("north", "Nowhere"),))]
    with pytest.raises(UnknownLocationError) as excinfo:
        World.build(records)
    assert excinfo.value.name == "Nowhere"


def test_build_rejects_unknown_initial_location():
    with pytest.raises(UnknownLocationError):
        World.build([LocationRecord("Start")], "Elsewhere")


def test_build_rejects_empty_initial_location():
    with pytest.raises(UnknownLocationError):
        World.build([LocationRecord("Start")], "")


def test_build_rejects_duplicate_names():
    with pytest.raises(DuplicateLocationError):
        World.build([LocationRecord("Start"), LocationRecord("Start")])


def test_build_rejects_empty_records():
    with pytest.raises(ValueError):
        build_world([])


def test_initial_location_defaults_to_first_record():
    world = build_world([LocationRecord("First"), LocationRecord("Second")])
    assert world.initial_location_name == "First"
    assert world.get_initial_location() is world.find_location("First")


def test_find_location_unknown(scenario_world: World):
    with pytest.raises(UnknownLocationError):
        scenario_world.find_location("Cellar")


def test_unknown_location_is_a_lookup_error(scenario_world: World):
    with pytest.raises(LookupError):
        scenario_world.find_location("Cellar")


def test_locations_are_read_only(scenario_world: World):
    with pytest.raises(TypeError):
        scenario_world.locations["Cellar"] = Location("Cellar")
    assert "Cellar" not in scenario_world
    assert len(scenario_world) == 2


def test_location_str_is_name(scenario_world: World):
    assert str(scenario_world.initial_location) == "Start"
