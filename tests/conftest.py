# tests/conftest.py
import os
import sys

import pytest

# Ensure repository root is on PYTHONPATH for tests
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from models.entity_models import (  # noqa: E402
    Character,
    Culture,
    Economy,
    Event,
    Location,
    MagicSystem,
    PlotItem,
)
from models.graph_models import StorySnapshot  # noqa: E402


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add custom CLI options for this repo.

    --unit-stubs: skip tests marked as heavier (integration, slow) so CI can run
    the hermetic core suite on its own.
    """
    parser.addoption(
        "--unit-stubs",
        action="store_true",
        default=False,
        help="Run only hermetic unit tests; ignore heavier suites.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """When --unit-stubs is passed, skip heavier-marked tests."""
    if not config.getoption("--unit-stubs"):
        return

    skip_marker = pytest.mark.skip(reason="skipped by --unit-stubs")
    heavy_markers = {"integration", "slow"}
    for item in items:
        for m in item.iter_markers():
            if m.name in heavy_markers:
                item.add_marker(skip_marker)
                break


@pytest.fixture
def story_snapshot() -> StorySnapshot:
    """A small world touching every entity kind and implicit-edge field."""
    return StorySnapshot(
        characters=[
            Character(
                id="c1",
                name="Alice",
                relationships=["Bob", {"target": "c3", "type": "rival", "label": "old feud"}],
                locations=["Harbor"],
                events=["e1"],
                owned_items=["i1"],
                cultures=["cu1"],
                magic_systems=["Runecraft"],
            ),
            Character(id="c2", name="Bob", connections=[{"target": "Alice", "type": "family", "label": "sibling"}]),
            Character(id="c3", name="Cora"),
        ],
        locations=[
            Location(id="l1", name="Harbor", parent_location="Port City"),
            Location(id="l2", name="Port City"),
        ],
        events=[
            Event(
                id="e1",
                name="The Storm",
                characters=["Alice", "Bob"],
                location="Harbor",
                items=["Sword"],
                cultures=["Sea Folk"],
                magic_systems=["m1"],
            ),
        ],
        items=[
            PlotItem(
                id="i1",
                name="Sword",
                current_owner="c1",
                current_location="l2",
                associated_events=["e1"],
            ),
        ],
        cultures=[
            Culture(
                id="cu1",
                name="Sea Folk",
                linked_locations=["Harbor"],
                linked_characters=["Cora"],
                linked_events=["The Storm"],
            ),
        ],
        economies=[Economy(id="ec1", name="Salt Trade", linked_locations=["Port City"])],
        magic_systems=[
            MagicSystem(
                id="m1",
                name="Runecraft",
                linked_locations=["l1"],
                linked_characters=["Cora"],
                linked_events=["e1"],
                linked_items=["Sword"],
            ),
        ],
    )
