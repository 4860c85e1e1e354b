# models/__init__.py
"""Export commonly used Loreweb model types.

This package exposes a stable import surface for the Pydantic entity models and
the graph node/edge shapes derived from them.
"""

from .entity_models import (
    Character,
    Connection,
    Culture,
    Economy,
    Event,
    Location,
    MagicSystem,
    PlotItem,
    StoryEntity,
    TypedRelationship,
)
from .graph_models import (
    CanonicalRule,
    EndpointPattern,
    GraphEdge,
    GraphNode,
    RelationshipGraph,
    StorySnapshot,
)

__all__ = [
    "StoryEntity",
    "Character",
    "Location",
    "Event",
    "PlotItem",
    "Culture",
    "Economy",
    "MagicSystem",
    "TypedRelationship",
    "Connection",
    "GraphNode",
    "GraphEdge",
    "EndpointPattern",
    "CanonicalRule",
    "StorySnapshot",
    "RelationshipGraph",
]
