"""Tests for legacy relationship list normalization."""

from core.relationship_normalization import (
    has_typed_relationships,
    migrate_string_relationships_to_typed,
    normalize_relationships,
)
from models.entity_models import TypedRelationship


def test_migrate_string_relationships_to_typed():
    assert migrate_string_relationships_to_typed(["Bob", "Cora"]) == [
        TypedRelationship(target="Bob", type="neutral", label=None),
        TypedRelationship(target="Cora", type="neutral", label=None),
    ]


def test_migrate_empty_list():
    assert migrate_string_relationships_to_typed([]) == []


def test_normalize_string_entry():
    assert normalize_relationships(["Bob"]) == [TypedRelationship(target="Bob", type="neutral", label=None)]


def test_normalize_passes_typed_entries_through():
    typed = TypedRelationship(target="Cora", type="rival", label="old feud")
    as_mapping = {"target": "Dan", "type": "ally"}

    normalized = normalize_relationships(["Bob", typed, as_mapping])

    assert normalized[0] == TypedRelationship(target="Bob")
    assert normalized[1] is typed
    assert normalized[2] is as_mapping


def test_normalize_does_not_mutate_input():
    relationships = ["Bob"]
    normalize_relationships(relationships)

    assert relationships == ["Bob"]


def test_has_typed_relationships():
    assert has_typed_relationships([TypedRelationship(target="Bob")]) is True
    assert has_typed_relationships(["Bob", {"target": "Cora", "type": "ally"}]) is True
    assert has_typed_relationships(["Bob", "Cora"]) is False
    assert has_typed_relationships([{"target": "Cora"}]) is False
    assert has_typed_relationships([]) is False
