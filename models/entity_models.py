# models/entity_models.py
"""Define the narrative entity shapes the relationship graph is derived from.

These models are the in-memory form of entities handed over by the storage layer.
They are intentionally permissive:

- Field names follow the camelCase spelling used in stored frontmatter
  (``ownedItems``, ``currentOwner``); Python code uses the snake_case attribute
  names, and either spelling is accepted on input.
- Unknown fields are preserved (``extra="allow"``).
- Malformed reference fields are coerced rather than rejected: a non-list value
  where a list is expected becomes ``[]``, non-string list members are dropped,
  and typed relationship entries that cannot be understood are dropped.

Notes:
    Identifier uniqueness (``id`` or ``name``) across a snapshot is a caller
    contract; see [`build_node_index()`](core/graph_index.py:1).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.graph_constants import (
    DEFAULT_RELATIONSHIP_TYPE,
    RELATIONSHIP_TYPES,
    RelationshipType,
)

logger = structlog.get_logger(__name__)

_REFERENCE_LIST_FIELDS = (
    "locations",
    "events",
    "owned_items",
    "cultures",
    "magic_systems",
    "characters",
    "items",
    "associated_events",
    "child_location_ids",
    "linked_locations",
    "linked_characters",
    "linked_events",
    "linked_items",
    "linked_cultures",
)

_REFERENCE_SCALAR_FIELDS = (
    "location",
    "current_owner",
    "current_location",
    "parent_location",
    "parent_location_id",
)


def coerce_reference_list(value: Any) -> list[str]:
    """Return the string members of ``value`` or ``[]`` when it is not a list."""
    if not isinstance(value, list):
        return []
    return [ref for ref in value if isinstance(ref, str)]


def coerce_typed_entry(entry: Any) -> TypedRelationship | dict[str, Any] | None:
    """Return a typed relationship payload for ``entry`` or ``None`` if unusable.

    A missing ``type`` defaults to ``neutral``; an unknown ``type`` makes the
    entry unusable. A non-string ``label`` is discarded.
    """
    if isinstance(entry, TypedRelationship):
        return entry
    if not isinstance(entry, Mapping):
        return None
    target = entry.get("target")
    if not isinstance(target, str):
        return None
    rel_type = entry.get("type") or DEFAULT_RELATIONSHIP_TYPE
    if rel_type not in RELATIONSHIP_TYPES:
        return None
    label = entry.get("label")
    payload = dict(entry)
    payload["type"] = rel_type
    payload["label"] = label if isinstance(label, str) else None
    return payload


def _coerce_typed_list(value: Any, field_name: str) -> list[Any]:
    if not isinstance(value, list):
        return []
    entries: list[Any] = []
    for entry in value:
        coerced = coerce_typed_entry(entry)
        if coerced is None:
            logger.debug("Dropping malformed relationship entry", field=field_name, entry=entry)
            continue
        entries.append(coerced)
    return entries


class TypedRelationship(BaseModel):
    """A relationship to another entity with an explicit type and optional label."""

    model_config = ConfigDict(extra="allow")

    target: str
    type: RelationshipType = DEFAULT_RELATIONSHIP_TYPE
    label: str | None = None


# Generic connections share the typed relationship shape.
Connection = TypedRelationship


class StoryEntity(BaseModel):
    """Common fields for every narrative entity.

    Subclasses declare ``kind`` (the graph node kind) and ``entity_type_tag``
    (the tag used in snapshot files and templates).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    kind: ClassVar[str]
    entity_type_tag: ClassVar[str]

    id: str | None = None
    name: str
    connections: list[Connection] = Field(default_factory=list)

    @field_validator("id", "name", mode="before")
    @classmethod
    def _stringify_identifier(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("connections", mode="before")
    @classmethod
    def _coerce_connections(cls, value: Any) -> list[Any]:
        return _coerce_typed_list(value, "connections")

    @field_validator(*_REFERENCE_LIST_FIELDS, mode="before", check_fields=False)
    @classmethod
    def _coerce_reference_lists(cls, value: Any) -> list[str]:
        return coerce_reference_list(value)

    @field_validator(*_REFERENCE_SCALAR_FIELDS, mode="before", check_fields=False)
    @classmethod
    def _coerce_reference_scalars(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @property
    def node_id(self) -> str:
        """Identifier used for graph nodes: ``id`` when non-empty, else ``name``."""
        return self.id or self.name


class Character(StoryEntity):
    kind: ClassVar[str] = "character"
    entity_type_tag: ClassVar[str] = "character"

    relationships: list[str | TypedRelationship] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    events: list[str] = Field(default_factory=list)
    owned_items: list[str] = Field(default_factory=list)
    cultures: list[str] = Field(default_factory=list)
    magic_systems: list[str] = Field(default_factory=list)

    @field_validator("relationships", mode="before")
    @classmethod
    def _coerce_relationships(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        entries: list[Any] = []
        for entry in value:
            if isinstance(entry, str):
                entries.append(entry)
                continue
            coerced = coerce_typed_entry(entry)
            if coerced is None:
                logger.debug("Dropping malformed relationship entry", field="relationships", entry=entry)
                continue
            entries.append(coerced)
        return entries


class Location(StoryEntity):
    kind: ClassVar[str] = "location"
    entity_type_tag: ClassVar[str] = "location"

    parent_location: str | None = None
    parent_location_id: str | None = None
    child_location_ids: list[str] | None = None


class Event(StoryEntity):
    kind: ClassVar[str] = "event"
    entity_type_tag: ClassVar[str] = "event"

    characters: list[str] = Field(default_factory=list)
    location: str | None = None
    items: list[str] = Field(default_factory=list)
    cultures: list[str] = Field(default_factory=list)
    magic_systems: list[str] = Field(default_factory=list)


class PlotItem(StoryEntity):
    kind: ClassVar[str] = "item"
    entity_type_tag: ClassVar[str] = "item"

    current_owner: str | None = None
    current_location: str | None = None
    associated_events: list[str] = Field(default_factory=list)


class Culture(StoryEntity):
    kind: ClassVar[str] = "culture"
    entity_type_tag: ClassVar[str] = "culture"

    linked_locations: list[str] = Field(default_factory=list)
    linked_characters: list[str] = Field(default_factory=list)
    linked_events: list[str] = Field(default_factory=list)


class Economy(StoryEntity):
    kind: ClassVar[str] = "economy"
    entity_type_tag: ClassVar[str] = "economy"

    linked_locations: list[str] = Field(default_factory=list)


class MagicSystem(StoryEntity):
    kind: ClassVar[str] = "magicsystem"
    entity_type_tag: ClassVar[str] = "magicSystem"

    linked_locations: list[str] = Field(default_factory=list)
    linked_characters: list[str] = Field(default_factory=list)
    linked_events: list[str] = Field(default_factory=list)
    linked_items: list[str] = Field(default_factory=list)
    linked_cultures: list[str] = Field(default_factory=list)


ENTITY_MODEL_BY_KIND: dict[str, type[StoryEntity]] = {
    model.kind: model
    for model in (Character, Location, Event, PlotItem, Culture, Economy, MagicSystem)
}

ENTITY_MODEL_BY_TAG: dict[str, type[StoryEntity]] = {
    model.entity_type_tag: model for model in ENTITY_MODEL_BY_KIND.values()
}


def coerce_entities(
    model: type[StoryEntity], entities: Any
) -> list[StoryEntity]:
    """Validate a collection of entities into ``model`` instances.

    Instances of ``model`` pass through unchanged; mappings are validated.
    ``None`` or a non-list collection yields ``[]``.

    Raises:
        pydantic.ValidationError: If a mapping cannot be validated (for example,
            it has no ``name``).
    """
    if entities is None or isinstance(entities, (str, bytes, Mapping)):
        return []
    coerced: list[StoryEntity] = []
    for entity in entities:
        if isinstance(entity, model):
            coerced.append(entity)
        elif isinstance(entity, Mapping):
            coerced.append(model.model_validate(dict(entity)))
        elif isinstance(entity, StoryEntity):
            coerced.append(model.model_validate(entity.model_dump(by_alias=True)))
        else:
            logger.debug("Dropping non-entity collection member", kind=model.kind, entity=entity)
    return coerced
