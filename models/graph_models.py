# models/graph_models.py
"""Define the node, edge and snapshot models of the relationship graph.

Notes:
    - [`GraphEdge`](models/graph_models.py:1) is frozen and hashable. Two edges are
      the same edge iff ``(source, target, relationship_type, label)`` are equal,
      where ``label=None`` is distinct from every string label.
    - All graph structures are derived outputs. They are recomputed from a
      [`StorySnapshot`](models/graph_models.py:1) on demand and never persisted by
      the core.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.entity_models import (
    Character,
    Culture,
    Economy,
    Event,
    Location,
    MagicSystem,
    PlotItem,
    StoryEntity,
)
from models.graph_constants import EntityKind, RelationshipType

EdgeIdentity = tuple[str, str, str, str | None]


class GraphNode(BaseModel):
    """A node of the relationship graph wrapping its source entity."""

    id: str
    label: str
    type: EntityKind
    data: StoryEntity

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label, "type": self.type}


class GraphEdge(BaseModel):
    """A directed, typed edge between two node identifiers."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    source: str
    target: str
    relationship_type: RelationshipType
    label: str | None = None

    @property
    def identity(self) -> EdgeIdentity:
        return (self.source, self.target, self.relationship_type, self.label)

    def reversed(self) -> GraphEdge:
        """Return the mirror edge with the same type and label."""
        return GraphEdge(
            source=self.target,
            target=self.source,
            relationship_type=self.relationship_type,
            label=self.label,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "source": self.source,
            "target": self.target,
            "relationshipType": self.relationship_type,
        }
        if self.label is not None:
            data["label"] = self.label
        return data


class EndpointPattern(BaseModel):
    """Endpoint kinds plus label that an edge must carry to match a rule side."""

    model_config = ConfigDict(frozen=True)

    source_type: EntityKind
    target_type: EntityKind
    label: str


class CanonicalRule(BaseModel):
    """Prefer one direction of a semantically reciprocal neutral relationship."""

    model_config = ConfigDict(frozen=True)

    preferred: EndpointPattern
    redundant: EndpointPattern


class StorySnapshot(BaseModel):
    """The full set of entity collections a graph is computed from.

    Collection keys follow the storage layer's spelling (``magicSystems``); the
    Python attribute is ``magic_systems``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    characters: list[Character] = Field(default_factory=list)
    locations: list[Location] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    items: list[PlotItem] = Field(default_factory=list)
    cultures: list[Culture] = Field(default_factory=list)
    economies: list[Economy] = Field(default_factory=list)
    magic_systems: list[MagicSystem] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_collection(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    def entities_by_kind(self) -> dict[str, list[StoryEntity]]:
        """Return the collections keyed by graph node kind, characters first."""
        return {
            "character": list(self.characters),
            "location": list(self.locations),
            "event": list(self.events),
            "item": list(self.items),
            "culture": list(self.cultures),
            "economy": list(self.economies),
            "magicsystem": list(self.magic_systems),
        }

    def all_entities(self) -> list[StoryEntity]:
        """Return every entity in collection order."""
        return [entity for entities in self.entities_by_kind().values() for entity in entities]


class RelationshipGraph(BaseModel):
    """Nodes and edges ready for rendering."""

    nodes: dict[str, GraphNode] = Field(default_factory=dict)
    edges: list[GraphEdge] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes.values()],
            "edges": [edge.to_dict() for edge in self.edges],
        }
