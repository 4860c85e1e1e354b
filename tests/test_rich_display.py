from __future__ import annotations

import io
from collections.abc import Generator

import pytest
from rich.console import Console

from core.relationship_graph_service import build_relationship_graph
from models.graph_models import RelationshipGraph
from ui.rich_display import GraphDisplayManager, render_graph_table


@pytest.fixture(autouse=True)
def _reset_shared_console() -> Generator[None, None, None]:
    original = GraphDisplayManager._shared_console
    GraphDisplayManager._shared_console = None
    yield
    GraphDisplayManager._shared_console = original


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestSharedConsole:
    def test_shared_console_is_reused(self) -> None:
        assert GraphDisplayManager.get_shared_console() is GraphDisplayManager.get_shared_console()

    def test_manager_defaults_to_shared_console(self) -> None:
        assert GraphDisplayManager().console is GraphDisplayManager.get_shared_console()

    def test_explicit_console_is_used(self) -> None:
        console = _console()
        assert GraphDisplayManager(console).console is console


class TestTables:
    def test_edge_table_rows(self, story_snapshot) -> None:
        graph = build_relationship_graph(story_snapshot)
        table = GraphDisplayManager(_console()).build_edge_table(graph)

        assert table.title == f"Relationships ({len(graph.edges)})"
        assert table.row_count == len(graph.edges)
        assert [column.header for column in table.columns] == ["Source", "Relationship", "Label", "Target"]

    def test_node_table_rows(self, story_snapshot) -> None:
        graph = build_relationship_graph(story_snapshot)
        table = GraphDisplayManager(_console()).build_node_table(graph)

        assert table.title == "Entities (10)"
        assert table.row_count == 10

    def test_render_writes_labels(self, story_snapshot) -> None:
        console = _console()
        render_graph_table(build_relationship_graph(story_snapshot), console=console)
        output = console.file.getvalue()

        assert "Relationships (26)" in output
        assert "old feud" in output
        assert "Runecraft" in output
        assert "Entities" not in output

    def test_render_with_nodes(self, story_snapshot) -> None:
        console = _console()
        render_graph_table(build_relationship_graph(story_snapshot), console=console, show_nodes=True)
        output = console.file.getvalue()

        assert "Entities (10)" in output
        assert "round-hexagon" in output

    def test_unknown_endpoint_falls_back_to_id(self) -> None:
        graph = RelationshipGraph.model_validate(
            {"edges": [{"source": "ghost", "target": "shade", "relationship_type": "enemy"}]}
        )
        console = _console()
        render_graph_table(graph, console=console)
        output = console.file.getvalue()

        assert "ghost" in output
        assert "shade" in output
