# core/location_hierarchy.py
"""Upgrade name-based location parents to identifier-based hierarchy fields.

Older location files record their parent by name in ``parentLocation``. Newer
files also carry ``parentLocationId`` and a derived ``childLocationIds`` list.
These helpers compute the newer fields from a snapshot of locations and return
updated copies; inputs are never mutated.

Notes:
    ``parentLocation`` is kept after migration so readers that only know the
    legacy field keep working.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from models.entity_models import Location

logger = structlog.get_logger(__name__)


def migrate_parent_location_to_id(location: Location, locations: Sequence[Location]) -> Location:
    """Return ``location`` with ``parent_location_id`` resolved from ``parent_location``.

    The parent is matched by exact name or exact id. Locations that have no
    legacy parent, or already have a parent id, are returned as is. When the
    parent cannot be found a warning is logged and the location is returned
    unchanged.
    """
    if not location.parent_location or location.parent_location_id:
        return location

    parent = next(
        (
            candidate
            for candidate in locations
            if candidate.name == location.parent_location or candidate.id == location.parent_location
        ),
        None,
    )
    if parent is None:
        logger.warning(
            "Could not find parent location",
            parent_location=location.parent_location,
            location=location.name,
        )
        return location

    return location.model_copy(update={"parent_location_id": parent.node_id}, deep=True)


def child_location_ids(location: Location, locations: Sequence[Location]) -> list[str]:
    """Return identifiers of every location whose parent is ``location``."""
    location_id = location.node_id
    return [
        candidate.node_id
        for candidate in locations
        if candidate.parent_location_id == location_id or candidate.parent_location == location.name
    ]


def migrate_locations(locations: Sequence[Location]) -> list[Location]:
    """Migrate every location's parent reference, then fill in child ids.

    Child ids are computed against the migrated set, so a child migrated in the
    same pass is already attributed to its parent.
    """
    migrated = [migrate_parent_location_to_id(location, locations) for location in locations]

    result: list[Location] = []
    for location in migrated:
        children = child_location_ids(location, migrated)
        update = {"child_location_ids": children} if children or location.child_location_ids is None else {}
        result.append(location.model_copy(update=update, deep=True))

    logger.debug(
        "Migrated location hierarchy",
        locations=len(result),
        with_parent_id=sum(1 for location in result if location.parent_location_id),
    )
    return result
