"""Tests for migrating name-based location parents to id-based hierarchy fields."""

from core.location_hierarchy import (
    child_location_ids,
    migrate_locations,
    migrate_parent_location_to_id,
)
from models.entity_models import Location


def _locations():
    return [
        Location(id="l1", name="Harbor", parent_location="Port City"),
        Location(id="l2", name="Port City"),
        Location(id="l3", name="Lighthouse", parent_location="l1"),
    ]


def test_parent_resolved_by_name():
    harbor, port_city, _ = _locations()

    migrated = migrate_parent_location_to_id(harbor, _locations())

    assert migrated.parent_location_id == "l2"
    assert migrated.parent_location == "Port City"
    assert harbor.parent_location_id is None
    assert port_city.parent_location_id is None


def test_parent_resolved_by_id():
    lighthouse = _locations()[2]

    assert migrate_parent_location_to_id(lighthouse, _locations()).parent_location_id == "l1"


def test_parent_id_falls_back_to_name_when_parent_has_no_id():
    locations = [
        Location(name="Harbor", parent_location="Port City"),
        Location(name="Port City"),
    ]

    assert migrate_parent_location_to_id(locations[0], locations).parent_location_id == "Port City"


def test_location_without_parent_is_unchanged():
    port_city = _locations()[1]

    assert migrate_parent_location_to_id(port_city, _locations()) is port_city


def test_existing_parent_id_is_kept():
    location = Location(id="l1", name="Harbor", parent_location="Port City", parent_location_id="l9")

    assert migrate_parent_location_to_id(location, _locations()).parent_location_id == "l9"


def test_missing_parent_leaves_location_unchanged():
    location = Location(id="l1", name="Harbor", parent_location="Atlantis")

    migrated = migrate_parent_location_to_id(location, [location])

    assert migrated is location
    assert migrated.parent_location_id is None


def test_child_location_ids():
    locations = migrate_locations(_locations())
    port_city = locations[1]

    assert child_location_ids(port_city, locations) == ["l1"]


def test_migrate_locations_fills_parents_and_children():
    harbor, port_city, lighthouse = migrate_locations(_locations())

    assert harbor.parent_location_id == "l2"
    assert harbor.child_location_ids == ["l3"]
    assert port_city.parent_location_id is None
    assert port_city.child_location_ids == ["l1"]
    assert lighthouse.parent_location_id == "l1"
    assert lighthouse.child_location_ids == []


def test_migrate_locations_keeps_existing_children_when_none_found():
    locations = [Location(id="l1", name="Harbor", child_location_ids=["l7"])]

    assert migrate_locations(locations)[0].child_location_ids == ["l7"]


def test_migrate_locations_does_not_mutate_inputs():
    locations = _locations()
    migrate_locations(locations)

    assert [location.parent_location_id for location in locations] == [None, None, None]
    assert [location.child_location_ids for location in locations] == [None, None, None]


def test_migrated_locations_do_not_share_lists_with_inputs():
    harbor = Location(
        id="l1",
        name="Harbor",
        parent_location="Port City",
        connections=[{"target": "l2", "type": "ally"}],
        child_location_ids=["l7"],
    )
    port_city = Location(id="l2", name="Port City")

    migrated = migrate_parent_location_to_id(harbor, [harbor, port_city])
    migrated.connections.append(migrated.connections[0])
    migrated.child_location_ids.append("l8")

    assert len(harbor.connections) == 1
    assert harbor.child_location_ids == ["l7"]

    lighthouse = Location(id="l3", name="Lighthouse", child_location_ids=["l9"])
    (kept,) = migrate_locations([lighthouse])
    kept.child_location_ids.append("l10")

    assert kept is not lighthouse
    assert lighthouse.child_location_ids == ["l9"]
