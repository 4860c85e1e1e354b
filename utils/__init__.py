# utils/__init__.py
"""File-level helpers for Loreweb: snapshot loading and graph export."""

from __future__ import annotations

from .snapshot_io import (
    export_graph,
    graph_export_payload,
    load_snapshot_file,
    snapshot_from_document,
)

__all__ = [
    "export_graph",
    "graph_export_payload",
    "load_snapshot_file",
    "snapshot_from_document",
]
