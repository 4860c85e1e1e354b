# core/edge_synthesis.py
"""Synthesize the raw edge list of the relationship graph.

Edges come from three places on each entity, discovered in this order:

1. ``connections``: typed connections, present on every entity kind.
2. ``relationships``: legacy relationship lists, characters only. Plain strings
   become untyped ``neutral`` edges; typed entries keep their type and label.
3. Implicit reference fields, declared per kind in ``IMPLICIT_EDGE_RULES``.

Every reference is resolved through [`resolve_entity_id()`](core/graph_index.py:1).
Unresolvable references contribute no edge and do not interrupt synthesis.
Output order is discovery order; an edge whose identity is already present is
never added twice.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, NamedTuple

import structlog

from core.graph_index import (
    NodeIndex,
    collect_entities_by_kind,
    index_entities,
    resolve_entity_id,
)
from models.entity_models import StoryEntity
from models.graph_constants import (
    DEFAULT_RELATIONSHIP_TYPE,
    LABEL_ACTIVE_IN,
    LABEL_ASSOCIATED,
    LABEL_ASSOCIATED_WITH,
    LABEL_BELONGS_TO,
    LABEL_FEATURED_IN,
    LABEL_INCLUDES,
    LABEL_INVOLVED,
    LABEL_INVOLVES,
    LABEL_LOCATED_AT,
    LABEL_OCCURRED_AT,
    LABEL_OWNED_BY,
    LABEL_OWNS,
    LABEL_PRACTICED_IN,
    LABEL_PRESENT_IN,
    LABEL_RELATED_TO,
    LABEL_USED_BY,
    LABEL_USES,
    LABEL_WITHIN,
)
from models.graph_models import EdgeIdentity, GraphEdge

logger = structlog.get_logger(__name__)


class ImplicitEdgeRule(NamedTuple):
    """A reference field that implies a ``neutral`` edge with a fixed label."""

    field: str
    label: str
    scalar: bool = False


IMPLICIT_EDGE_RULES: dict[str, tuple[ImplicitEdgeRule, ...]] = {
    "character": (
        ImplicitEdgeRule("locations", LABEL_ASSOCIATED),
        ImplicitEdgeRule("events", LABEL_INVOLVED),
        ImplicitEdgeRule("owned_items", LABEL_OWNS),
        ImplicitEdgeRule("cultures", LABEL_BELONGS_TO),
        ImplicitEdgeRule("magic_systems", LABEL_USES),
    ),
    "location": (
        ImplicitEdgeRule("parent_location", LABEL_WITHIN, scalar=True),
    ),
    "event": (
        ImplicitEdgeRule("characters", LABEL_INVOLVED),
        ImplicitEdgeRule("location", LABEL_OCCURRED_AT, scalar=True),
        ImplicitEdgeRule("items", LABEL_INVOLVES),
        ImplicitEdgeRule("cultures", LABEL_INVOLVES),
        ImplicitEdgeRule("magic_systems", LABEL_INVOLVES),
    ),
    "item": (
        ImplicitEdgeRule("current_owner", LABEL_OWNED_BY, scalar=True),
        ImplicitEdgeRule("current_location", LABEL_LOCATED_AT, scalar=True),
        ImplicitEdgeRule("associated_events", LABEL_FEATURED_IN),
    ),
    "culture": (
        ImplicitEdgeRule("linked_locations", LABEL_PRESENT_IN),
        ImplicitEdgeRule("linked_characters", LABEL_INCLUDES),
        ImplicitEdgeRule("linked_events", LABEL_RELATED_TO),
    ),
    "economy": (
        ImplicitEdgeRule("linked_locations", LABEL_ACTIVE_IN),
    ),
    "magicsystem": (
        ImplicitEdgeRule("linked_locations", LABEL_PRACTICED_IN),
        ImplicitEdgeRule("linked_characters", LABEL_USED_BY),
        ImplicitEdgeRule("linked_events", LABEL_FEATURED_IN),
        ImplicitEdgeRule("linked_items", LABEL_ASSOCIATED_WITH),
    ),
}


class EdgeAccumulator:
    """Ordered edge list that refuses edges whose identity is already present."""

    def __init__(self, edges: Iterable[GraphEdge] = ()) -> None:
        self.edges: list[GraphEdge] = []
        self._seen: set[EdgeIdentity] = set()
        for edge in edges:
            self.add(edge)

    def __contains__(self, identity: object) -> bool:
        return identity in self._seen

    def __len__(self) -> int:
        return len(self.edges)

    def add(self, edge: GraphEdge) -> bool:
        """Append ``edge`` unless an identical edge exists. Returns True if added."""
        identity = edge.identity
        if identity in self._seen:
            return False
        self._seen.add(identity)
        self.edges.append(edge)
        return True

    def link(
        self,
        source_id: str,
        reference: str,
        node_index: NodeIndex,
        relationship_type: str,
        label: str | None,
    ) -> bool:
        """Resolve ``reference`` and add the resulting edge if it resolves."""
        target_id = resolve_entity_id(reference, node_index)
        if target_id is None:
            return False
        return self.add(
            GraphEdge(
                source=source_id,
                target=target_id,
                relationship_type=relationship_type,
                label=label,
            )
        )


def _implicit_references(entity: StoryEntity, rule: ImplicitEdgeRule) -> list[str]:
    value = getattr(entity, rule.field, None)
    if rule.scalar:
        return [value] if isinstance(value, str) and value else []
    if not isinstance(value, list):
        return []
    return [ref for ref in value if isinstance(ref, str)]


def _synthesize_entity_edges(
    kind: str,
    entity: StoryEntity,
    node_index: NodeIndex,
    accumulator: EdgeAccumulator,
) -> None:
    source_id = entity.node_id

    for connection in entity.connections:
        accumulator.link(source_id, connection.target, node_index, connection.type, connection.label)

    if kind == "character":
        for relationship in getattr(entity, "relationships", None) or []:
            if isinstance(relationship, str):
                accumulator.link(source_id, relationship, node_index, DEFAULT_RELATIONSHIP_TYPE, None)
            else:
                accumulator.link(
                    source_id,
                    relationship.target,
                    node_index,
                    relationship.type,
                    relationship.label,
                )

    for rule in IMPLICIT_EDGE_RULES.get(kind, ()):
        for reference in _implicit_references(entity, rule):
            accumulator.link(source_id, reference, node_index, DEFAULT_RELATIONSHIP_TYPE, rule.label)


def synthesize_edges(
    entities_by_kind: Mapping[str, Sequence[StoryEntity]],
    node_index: NodeIndex,
) -> list[GraphEdge]:
    """Walk every entity and emit the deduplicated raw edge list.

    Args:
        entities_by_kind: Validated entities keyed by graph node kind, in
            discovery order.
        node_index: Index used to resolve references, usually built from the
            same entities.

    Returns:
        A new list of edges in discovery order.
    """
    accumulator = EdgeAccumulator()
    for kind, entities in entities_by_kind.items():
        for entity in entities:
            _synthesize_entity_edges(kind, entity, node_index, accumulator)

    logger.debug(
        "Synthesized relationship edges",
        entities=sum(len(entities) for entities in entities_by_kind.values()),
        nodes=len(node_index),
        edges=len(accumulator),
    )
    return accumulator.edges


def extract_all_relationships(
    characters: Iterable[Any] | None,
    locations: Iterable[Any] | None,
    events: Iterable[Any] | None,
    items: Iterable[Any] | None,
    cultures: Iterable[Any] | None = None,
    economies: Iterable[Any] | None = None,
    magic_systems: Iterable[Any] | None = None,
) -> list[GraphEdge]:
    """Build the node index and synthesize every edge derivable from it.

    This is the primary entry point for callers holding raw entity collections.
    Entities may be models or mappings; see
    [`coerce_entities()`](models/entity_models.py:1).
    """
    entities_by_kind = collect_entities_by_kind(
        characters, locations, events, items, cultures, economies, magic_systems
    )
    return synthesize_edges(entities_by_kind, index_entities(entities_by_kind))
