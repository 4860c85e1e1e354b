# core/graph_index.py
"""Build the node index and resolve loose entity references against it.

The node index maps an entity's identifier (``id`` when non-empty, else ``name``)
to its [`GraphNode`](models/graph_models.py:1). It is a plain ``dict`` whose
iteration order is the insertion order of the source collections: characters,
locations, events, items, cultures, economies, magic systems.

Caller contract:
    Identifiers must be unique within a snapshot. This is not enforced. When two
    entities share an identifier the later one overwrites the earlier node
    (last write wins) and no error is raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from models.entity_models import (
    Character,
    Culture,
    Economy,
    Event,
    Location,
    MagicSystem,
    PlotItem,
    StoryEntity,
    coerce_entities,
)
from models.graph_models import GraphNode

NodeIndex = dict[str, GraphNode]

# Collection order used for indexing and for edge discovery.
ENTITY_COLLECTION_MODELS: tuple[type[StoryEntity], ...] = (
    Character,
    Location,
    Event,
    PlotItem,
    Culture,
    Economy,
    MagicSystem,
)


def collect_entities_by_kind(
    characters: Iterable[Any] | None,
    locations: Iterable[Any] | None,
    events: Iterable[Any] | None,
    items: Iterable[Any] | None,
    cultures: Iterable[Any] | None = None,
    economies: Iterable[Any] | None = None,
    magic_systems: Iterable[Any] | None = None,
) -> dict[str, list[StoryEntity]]:
    """Validate the seven entity collections and key them by graph node kind.

    The returned mapping preserves the canonical collection order.
    """
    collections = (characters, locations, events, items, cultures, economies, magic_systems)
    return {
        model.kind: coerce_entities(model, entities)
        for model, entities in zip(ENTITY_COLLECTION_MODELS, collections)
    }


def index_entities(entities_by_kind: Mapping[str, Sequence[StoryEntity]]) -> NodeIndex:
    """Build a node index from already validated entities keyed by kind."""
    node_index: NodeIndex = {}
    for kind, entities in entities_by_kind.items():
        for entity in entities:
            node_id = entity.node_id
            node_index[node_id] = GraphNode(
                id=node_id,
                label=entity.name,
                type=kind,
                data=entity,
            )
    return node_index


def build_node_index(
    characters: Iterable[Any] | None,
    locations: Iterable[Any] | None,
    events: Iterable[Any] | None,
    items: Iterable[Any] | None,
    cultures: Iterable[Any] | None = None,
    economies: Iterable[Any] | None = None,
    magic_systems: Iterable[Any] | None = None,
) -> NodeIndex:
    """Build a mapping from entity identifier to graph node.

    Args:
        characters: Character entities (models or mappings).
        locations: Location entities.
        events: Event entities.
        items: Plot item entities.
        cultures: Optional culture entities; defaults to none.
        economies: Optional economy entities; defaults to none.
        magic_systems: Optional magic system entities; defaults to none.

    Returns:
        A new dict keyed by ``id or name``. Later entities overwrite earlier ones
        sharing the same key.
    """
    return index_entities(
        collect_entities_by_kind(
            characters, locations, events, items, cultures, economies, magic_systems
        )
    )


def resolve_entity_id(reference: str, node_index: Mapping[str, GraphNode]) -> str | None:
    """Resolve a name or id reference to a node identifier.

    Resolution order:
    1. ``reference`` is itself a key of the index (exact id or name).
    2. The first node, in index order, whose label matches case-insensitively.

    Returns:
        The node identifier, or ``None`` when nothing matches. Callers drop the
        corresponding edge; an unresolved reference is not an error.
    """
    if reference in node_index:
        return reference

    lowered = reference.lower()
    for node_id, node in node_index.items():
        if node.label.lower() == lowered:
            return node_id

    return None


def resolve_entity_by_id(
    reference: str, entities: Iterable[StoryEntity]
) -> StoryEntity | None:
    """Find an entity in a flat list by id, name, then case-insensitive name.

    This applies the same matching policy as [`resolve_entity_id()`](core/graph_index.py:1)
    without needing a node index, for one-off lookups.
    """
    candidates = list(entities)

    for entity in candidates:
        if entity.id == reference or entity.name == reference:
            return entity

    lowered = reference.lower()
    for entity in candidates:
        if entity.name.lower() == lowered:
            return entity

    return None
