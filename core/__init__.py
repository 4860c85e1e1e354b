"""Core package initialization.

The relationship-graph engine lives in these modules:

- [`core.graph_index`](core/graph_index.py:1): node index and reference resolution.
- [`core.edge_synthesis`](core/edge_synthesis.py:1): raw edge synthesis.
- [`core.edge_postprocessing`](core/edge_postprocessing.py:1): mirror edges and
  redundancy filtering.
- [`core.relationship_graph_service`](core/relationship_graph_service.py:1): the
  composed pipeline over a snapshot.
"""

from __future__ import annotations

from .edge_postprocessing import (
    build_bidirectional_edges as build_bidirectional_edges,
)
from .edge_postprocessing import (
    filter_redundant_reciprocal_edges as filter_redundant_reciprocal_edges,
)
from .edge_synthesis import extract_all_relationships as extract_all_relationships
from .graph_index import build_node_index as build_node_index
from .graph_index import resolve_entity_by_id as resolve_entity_by_id
