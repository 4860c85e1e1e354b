# core/relationship_normalization.py
"""Upgrade legacy relationship lists to the typed relationship shape.

Older character files store ``relationships`` as a list of names. The helpers
here convert such lists, wholly or partially, into
[`TypedRelationship`](models/entity_models.py:1) entries typed ``neutral`` with no
label. They are pure and never mutate their argument.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from models.entity_models import TypedRelationship
from models.graph_constants import DEFAULT_RELATIONSHIP_TYPE


def _neutral(target: str) -> TypedRelationship:
    return TypedRelationship(target=target, type=DEFAULT_RELATIONSHIP_TYPE, label=None)


def migrate_string_relationships_to_typed(relationships: Iterable[str]) -> list[TypedRelationship]:
    """Convert a list of target names to neutral, unlabelled typed relationships."""
    return [_neutral(target) for target in relationships]


def has_typed_relationships(relationships: Iterable[Any]) -> bool:
    """Return True if any element is an object carrying a ``type`` field."""
    for relationship in relationships:
        if isinstance(relationship, TypedRelationship):
            return True
        if isinstance(relationship, Mapping) and "type" in relationship:
            return True
    return False


def normalize_relationships(relationships: Iterable[Any]) -> list[Any]:
    """Map string entries to neutral typed relationships; pass objects through."""
    return [
        _neutral(relationship) if isinstance(relationship, str) else relationship
        for relationship in relationships
    ]
