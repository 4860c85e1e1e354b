# utils/snapshot_io.py
"""Read entity snapshots from YAML/JSON files and write graph exports.

Snapshot document layout (YAML shown, JSON is equivalent)::

    characters:
      - id: c1
        name: Alice
        ownedItems: [i1]
    items:
      - id: i1
        name: Sword
        currentOwner: c1
    entities:            # optional flat list, tagged per entity
      - entityType: magicSystem
        name: Runecraft

Collection keys: ``characters``, ``locations``, ``events``, ``items``,
``cultures``, ``economies``, ``magicSystems``. Entities in ``entities`` are
appended to the collection named by their ``entityType`` tag.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from core.exceptions import (
    SnapshotError,
    SnapshotLoadError,
    SnapshotValidationError,
    create_error_context,
)
from core.graph_display import get_entity_shape, get_relationship_color
from models.graph_constants import SNAPSHOT_COLLECTION_BY_TAG
from models.graph_models import RelationshipGraph, StorySnapshot

logger = structlog.get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
        raise SnapshotLoadError(
            "Snapshot file must be YAML or JSON",
            details=create_error_context(path=str(path), suffix=suffix or None),
        )
    try:
        with path.open(encoding="utf-8") as f:
            if suffix in JSON_SUFFIXES:
                return json.load(f)
            return yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise SnapshotLoadError(
            "Snapshot file not found", details=create_error_context(path=str(path))
        ) from exc
    except OSError as exc:
        raise SnapshotLoadError(
            "Snapshot file could not be read",
            details=create_error_context(path=str(path), error=str(exc)),
        ) from exc
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SnapshotLoadError(
            "Snapshot file could not be parsed",
            details=create_error_context(path=str(path), error=str(exc)),
        ) from exc


def snapshot_from_document(document: Any, source: str | None = None) -> StorySnapshot:
    """Validate a parsed snapshot document into a [`StorySnapshot`](models/graph_models.py:1).

    An empty document yields an empty snapshot.

    Raises:
        SnapshotLoadError: If the document root is not a mapping.
        SnapshotValidationError: If an entity cannot be validated.
    """
    if document is None:
        return StorySnapshot()
    if not isinstance(document, Mapping):
        raise SnapshotLoadError(
            "Snapshot document root must be a mapping",
            details=create_error_context(source=source, root_type=type(document).__name__),
        )

    collections: dict[str, list[Any]] = {}
    for collection in SNAPSHOT_COLLECTION_BY_TAG.values():
        entries = document.get(collection)
        if entries is None:
            continue
        if not isinstance(entries, list):
            logger.warning("Ignoring non-list snapshot collection", collection=collection, source=source)
            continue
        collections[collection] = list(entries)

    tagged = document.get("entities")
    for entry in tagged if isinstance(tagged, list) else []:
        tag = entry.get("entityType") if isinstance(entry, Mapping) else None
        collection = SNAPSHOT_COLLECTION_BY_TAG.get(tag) if isinstance(tag, str) else None
        if collection is None:
            logger.warning("Skipping snapshot entity with unknown entityType", entity_type=tag, source=source)
            continue
        payload = {key: value for key, value in entry.items() if key != "entityType"}
        collections.setdefault(collection, []).append(payload)

    try:
        return StorySnapshot.model_validate(collections)
    except ValidationError as exc:
        raise SnapshotValidationError(
            "Snapshot entities failed validation",
            details=create_error_context(source=source, errors=exc.error_count(), error=str(exc)),
        ) from exc


def load_snapshot_file(path: str | Path) -> StorySnapshot:
    """Load a YAML or JSON snapshot file.

    Raises:
        SnapshotLoadError: If the file is missing or unreadable, has an
            unsupported extension, is not valid UTF-8, cannot be parsed, or its
            root is not a mapping.
        SnapshotValidationError: If an entity cannot be validated.
    """
    target = Path(path)
    snapshot = snapshot_from_document(_read_document(target), source=str(target))
    logger.info(
        "Loaded story snapshot",
        path=str(target),
        entities=len(snapshot.all_entities()),
    )
    return snapshot


def graph_export_payload(graph: RelationshipGraph) -> dict[str, Any]:
    """Return the graph as plain data with node shapes and edge colours attached."""
    data = graph.to_dict()
    for node in data["nodes"]:
        node["shape"] = get_entity_shape(node["type"])
    for edge in data["edges"]:
        edge["color"] = get_relationship_color(edge["relationshipType"])
    return data


def export_graph(graph: RelationshipGraph, path: str | Path) -> Path:
    """Write ``graph`` as JSON or YAML depending on the file extension.

    Writes UTF-8 with LF newlines and creates parent directories as needed.

    Raises:
        SnapshotError: If the extension is neither YAML nor JSON, or the file
            cannot be written.
    """
    target = Path(path)
    suffix = target.suffix.lower()
    data = graph_export_payload(graph)
    if suffix in JSON_SUFFIXES:
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    elif suffix in YAML_SUFFIXES:
        text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    else:
        raise SnapshotError(
            "Graph export path must end in .json, .yaml or .yml",
            details=create_error_context(path=str(target)),
        )

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text.replace("\r\n", "\n"))
    except OSError as exc:
        raise SnapshotError(
            "Graph export could not be written",
            details=create_error_context(path=str(target), error=str(exc)),
        ) from exc

    logger.info("Exported relationship graph", path=str(target), edges=len(graph.edges))
    return target
