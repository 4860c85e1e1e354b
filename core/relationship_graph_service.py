# core/relationship_graph_service.py
"""Compose the relationship-graph pipeline over a story snapshot.

Pipeline (each call recomputes everything from the snapshot):

1. Build the node index.
2. Synthesize the raw edge list.
3. Optionally add mirror edges for symmetric relationship types.
4. Optionally drop neutral edges made redundant by a preferred-direction edge.

Steps 3 and 4 default to the configured ``GRAPH_EXPAND_BIDIRECTIONAL`` and
``GRAPH_FILTER_REDUNDANT_RECIPROCALS`` values.
"""

from __future__ import annotations

import structlog

import config
from core.edge_postprocessing import (
    build_bidirectional_edges,
    filter_redundant_reciprocal_edges,
)
from core.edge_synthesis import synthesize_edges
from core.graph_index import index_entities
from models.graph_models import RelationshipGraph, StorySnapshot

logger = structlog.get_logger(__name__)


def build_relationship_graph(
    snapshot: StorySnapshot,
    expand_bidirectional: bool | None = None,
    filter_redundant: bool | None = None,
) -> RelationshipGraph:
    """Build nodes and edges for ``snapshot``.

    Args:
        snapshot: Entity collections to derive the graph from.
        expand_bidirectional: Add mirror edges for family, ally, rival and
            romantic relationships. ``None`` uses the configured default.
        filter_redundant: Drop reciprocal neutral edges covered by a preferred
            edge. ``None`` uses the configured default.

    Returns:
        A new [`RelationshipGraph`](models/graph_models.py:1).
    """
    if expand_bidirectional is None:
        expand_bidirectional = config.GRAPH_EXPAND_BIDIRECTIONAL
    if filter_redundant is None:
        filter_redundant = config.GRAPH_FILTER_REDUNDANT_RECIPROCALS

    entities_by_kind = snapshot.entities_by_kind()
    node_index = index_entities(entities_by_kind)
    edges = synthesize_edges(entities_by_kind, node_index)
    synthesized_count = len(edges)

    if expand_bidirectional:
        edges = build_bidirectional_edges(edges)
    expanded_count = len(edges)

    if filter_redundant:
        edges = filter_redundant_reciprocal_edges(edges, node_index)

    logger.debug(
        "Built relationship graph",
        nodes=len(node_index),
        synthesized_edges=synthesized_count,
        mirrored_edges=expanded_count - synthesized_count,
        redundant_edges_dropped=expanded_count - len(edges),
        edges=len(edges),
    )
    return RelationshipGraph(nodes=node_index, edges=edges)
