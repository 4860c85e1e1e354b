# models/graph_constants.py
"""
Constants describing the relationship-graph vocabulary.

**Naming contract:**

- **Graph node kinds** (``ENTITY_KINDS``) are the all-lowercase identifiers used on
  [`GraphNode.type`](models/graph_models.py:1), in canonical rules and in the shape
  table. The magic-system kind is spelled ``magicsystem``.
- **Entity type tags** (``ENTITY_TYPE_TAGS``) are the identifiers used by snapshot
  files and template settings. The magic-system tag is spelled ``magicSystem``.

The two spellings are separate literals. Code that needs to go
from one to the other must use the explicit maps below rather than case folding.
"""

from __future__ import annotations

from typing import Literal

# --- Relationship types ---
RelationshipType = Literal[
    "ally",
    "enemy",
    "family",
    "rival",
    "romantic",
    "mentor",
    "acquaintance",
    "neutral",
    "custom",
]

RELATIONSHIP_TYPES: tuple[str, ...] = (
    "ally",
    "enemy",
    "family",
    "rival",
    "romantic",
    "mentor",
    "acquaintance",
    "neutral",
    "custom",
)

DEFAULT_RELATIONSHIP_TYPE: RelationshipType = "neutral"

# Relationship kinds that are symmetric by nature and get a mirror edge.
BIDIRECTIONAL_RELATIONSHIP_TYPES: frozenset[str] = frozenset(
    {"family", "ally", "rival", "romantic"}
)

# --- Graph node kinds ---
EntityKind = Literal[
    "character",
    "location",
    "event",
    "item",
    "culture",
    "economy",
    "magicsystem",
]

ENTITY_KINDS: tuple[str, ...] = (
    "character",
    "location",
    "event",
    "item",
    "culture",
    "economy",
    "magicsystem",
)

# --- Entity type tags (snapshot files / templates) ---
ENTITY_TYPE_TAGS: tuple[str, ...] = (
    "character",
    "location",
    "event",
    "item",
    "culture",
    "economy",
    "magicSystem",
)

# Snapshot collection key for each entity type tag.
SNAPSHOT_COLLECTION_BY_TAG: dict[str, str] = {
    "character": "characters",
    "location": "locations",
    "event": "events",
    "item": "items",
    "culture": "cultures",
    "economy": "economies",
    "magicSystem": "magicSystems",
}

# --- Implicit edge labels ---
LABEL_ASSOCIATED = "associated"
LABEL_INVOLVED = "involved"
LABEL_OWNS = "owns"
LABEL_BELONGS_TO = "belongs to"
LABEL_USES = "uses"
LABEL_OCCURRED_AT = "occurred at"
LABEL_INVOLVES = "involves"
LABEL_OWNED_BY = "owned by"
LABEL_LOCATED_AT = "located at"
LABEL_FEATURED_IN = "featured in"
LABEL_WITHIN = "within"
LABEL_PRESENT_IN = "present in"
LABEL_INCLUDES = "includes"
LABEL_RELATED_TO = "related to"
LABEL_ACTIVE_IN = "active in"
LABEL_PRACTICED_IN = "practiced in"
LABEL_USED_BY = "used by"
LABEL_ASSOCIATED_WITH = "associated with"

# --- Canonical neutral relationship rules ---
# (preferred source kind, preferred target kind, preferred label),
# (redundant source kind, redundant target kind, redundant label)
CANONICAL_NEUTRAL_RELATIONSHIP_RULE_SPECS: tuple[
    tuple[tuple[str, str, str], tuple[str, str, str]], ...
] = (
    (("character", "item", LABEL_OWNS), ("item", "character", LABEL_OWNED_BY)),
    (("character", "event", LABEL_INVOLVED), ("event", "character", LABEL_INVOLVED)),
)

# --- Display tables ---
RELATIONSHIP_COLORS: dict[str, str] = {
    "ally": "#4ade80",
    "enemy": "#ef4444",
    "family": "#3b82f6",
    "rival": "#f97316",
    "romantic": "#ec4899",
    "mentor": "#a855f7",
    "acquaintance": "#94a3b8",
    "neutral": "#64748b",
    "custom": "#eab308",
}

ENTITY_SHAPES: dict[str, str] = {
    "character": "ellipse",
    "location": "round-rectangle",
    "event": "diamond",
    "item": "round-hexagon",
    "culture": "tag",
    "economy": "pentagon",
    "magicsystem": "star",
}

DEFAULT_ENTITY_SHAPE = "ellipse"
