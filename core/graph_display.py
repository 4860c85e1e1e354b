# core/graph_display.py
"""Presentation lookups for rendering the relationship graph."""

from __future__ import annotations

from models.graph_constants import (
    DEFAULT_ENTITY_SHAPE,
    DEFAULT_RELATIONSHIP_TYPE,
    ENTITY_SHAPES,
    RELATIONSHIP_COLORS,
)


def get_relationship_color(relationship_type: str) -> str:
    """Return the edge colour for a relationship type, falling back to neutral."""
    return RELATIONSHIP_COLORS.get(relationship_type, RELATIONSHIP_COLORS[DEFAULT_RELATIONSHIP_TYPE])


def get_entity_shape(kind: str) -> str:
    """Return the node shape for a graph node kind, falling back to an ellipse."""
    return ENTITY_SHAPES.get(kind, DEFAULT_ENTITY_SHAPE)
