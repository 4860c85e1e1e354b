# ui/rich_display.py
"""Render a relationship graph as Rich terminal tables.

Non-goals:
    - Graph layout or any visual beyond a tabular edge listing.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.graph_display import get_entity_shape, get_relationship_color
from models.graph_models import RelationshipGraph


class GraphDisplayManager:
    """Render relationship graphs to a shared Rich console."""

    # Shared Console singleton so tables and Rich logging share output
    _shared_console: Console | None = None

    @classmethod
    def get_shared_console(cls) -> Console:
        """Return the process-wide Rich `Console`."""
        if cls._shared_console is None:
            cls._shared_console = Console()
        return cls._shared_console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or self.get_shared_console()

    def build_edge_table(self, graph: RelationshipGraph) -> Table:
        """Build a table listing every edge with its endpoint labels."""
        table = Table(title=f"Relationships ({len(graph.edges)})", expand=False)
        table.add_column("Source")
        table.add_column("Relationship")
        table.add_column("Label")
        table.add_column("Target")

        for edge in graph.edges:
            source = graph.nodes.get(edge.source)
            target = graph.nodes.get(edge.target)
            table.add_row(
                source.label if source else edge.source,
                Text(edge.relationship_type, style=get_relationship_color(edge.relationship_type)),
                edge.label or "",
                target.label if target else edge.target,
            )
        return table

    def build_node_table(self, graph: RelationshipGraph) -> Table:
        """Build a table listing every node with its kind and shape."""
        table = Table(title=f"Entities ({len(graph.nodes)})", expand=False)
        table.add_column("Id")
        table.add_column("Name")
        table.add_column("Kind")
        table.add_column("Shape")

        for node in graph.nodes.values():
            table.add_row(node.id, node.label, node.type, get_entity_shape(node.type))
        return table

    def render(self, graph: RelationshipGraph, show_nodes: bool = False) -> None:
        if show_nodes:
            self.console.print(self.build_node_table(graph))
        self.console.print(self.build_edge_table(graph))


def render_graph_table(
    graph: RelationshipGraph, console: Console | None = None, show_nodes: bool = False
) -> None:
    """Print ``graph`` as Rich tables on ``console`` (or the shared console)."""
    GraphDisplayManager(console).render(graph, show_nodes=show_nodes)
