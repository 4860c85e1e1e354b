"""Tests for node index construction and reference resolution."""

from core.graph_index import build_node_index, resolve_entity_by_id, resolve_entity_id
from models.entity_models import Character, Event, Location, MagicSystem, PlotItem


def test_build_node_index_keys_by_id_then_name():
    index = build_node_index(
        [Character(id="c1", name="Alice"), Character(name="Bob")],
        [Location(id="", name="Harbor")],
        [],
        [],
    )

    assert list(index) == ["c1", "Bob", "Harbor"]
    assert index["c1"].label == "Alice"
    assert index["c1"].type == "character"
    assert index["Harbor"].type == "location"
    assert index["Bob"].data.name == "Bob"


def test_build_node_index_optional_collections_default_to_empty():
    index = build_node_index([], [], [Event(id="e1", name="Storm")], [PlotItem(id="i1", name="Sword")])

    assert set(index) == {"e1", "i1"}


def test_build_node_index_uses_lowercase_magicsystem_kind():
    index = build_node_index([], [], [], [], magic_systems=[MagicSystem(id="m1", name="Runecraft")])

    assert index["m1"].type == "magicsystem"


def test_build_node_index_accepts_mappings():
    index = build_node_index([{"id": "c1", "name": "Alice", "ownedItems": ["i1"]}], [], [], [])

    assert isinstance(index["c1"].data, Character)
    assert index["c1"].data.owned_items == ["i1"]


def test_build_node_index_last_write_wins_on_key_collision():
    """Colliding identifiers are a caller error; the later entity replaces the node."""
    index = build_node_index(
        [Character(id="x", name="Alice")],
        [Location(id="x", name="Harbor")],
        [],
        [],
    )

    assert len(index) == 1
    assert index["x"].label == "Harbor"
    assert index["x"].type == "location"


def test_build_node_index_does_not_mutate_inputs():
    characters = [Character(id="c1", name="Alice")]
    build_node_index(characters, [], [], [])

    assert characters == [Character(id="c1", name="Alice")]


class TestResolveEntityId:
    def setup_method(self):
        self.index = build_node_index(
            [Character(id="c1", name="Alice"), Character(name="Bob")],
            [Location(id="l1", name="Harbor")],
            [],
            [],
        )

    def test_exact_key_match_returns_reference(self):
        assert resolve_entity_id("c1", self.index) == "c1"
        assert resolve_entity_id("Bob", self.index) == "Bob"

    def test_case_insensitive_label_match(self):
        assert resolve_entity_id("aliCE", self.index) == "c1"
        assert resolve_entity_id("HARBOR", self.index) == "l1"

    def test_exact_label_without_key_resolves_through_scan(self):
        assert resolve_entity_id("Alice", self.index) == "c1"

    def test_unresolvable_reference_returns_none(self):
        assert resolve_entity_id("Nobody", self.index) is None

    def test_first_case_variant_wins(self):
        index = build_node_index(
            [Character(id="a", name="Alice"), Character(id="b", name="ALICE")], [], [], []
        )

        assert resolve_entity_id("alice", index) == "a"

    def test_ids_are_not_matched_case_insensitively(self):
        assert resolve_entity_id("C1", self.index) is None


class TestResolveEntityById:
    def setup_method(self):
        self.entities = [
            Character(id="c1", name="Alice"),
            Location(id="l1", name="Harbor"),
            PlotItem(name="Sword"),
        ]

    def test_exact_id(self):
        assert resolve_entity_by_id("l1", self.entities).name == "Harbor"

    def test_exact_name(self):
        assert resolve_entity_by_id("Sword", self.entities).name == "Sword"

    def test_case_insensitive_name(self):
        assert resolve_entity_by_id("alice", self.entities).id == "c1"

    def test_missing_returns_none(self):
        assert resolve_entity_by_id("nope", self.entities) is None

    def test_exact_match_preferred_over_earlier_case_variant(self):
        entities = [Character(id="a", name="bob"), Character(id="b", name="Bob")]

        assert resolve_entity_by_id("Bob", entities).id == "b"
