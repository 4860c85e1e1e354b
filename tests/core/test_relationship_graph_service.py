"""Tests for the composed relationship-graph pipeline."""

import config
from core.relationship_graph_service import build_relationship_graph
from models.graph_models import StorySnapshot


def _triples(edges):
    return [(e.source, e.target, e.relationship_type, e.label) for e in edges]


def test_nodes_cover_every_entity_in_collection_order(story_snapshot):
    graph = build_relationship_graph(story_snapshot)

    assert list(graph.nodes) == ["c1", "c2", "c3", "l1", "l2", "e1", "i1", "cu1", "ec1", "m1"]
    assert graph.nodes["m1"].type == "magicsystem"
    assert graph.nodes["i1"].type == "item"
    assert graph.nodes["c1"].label == "Alice"


def test_raw_pipeline_without_post_processing(story_snapshot):
    graph = build_relationship_graph(story_snapshot, expand_bidirectional=False, filter_redundant=False)

    assert len(graph.edges) == 26


def test_expansion_only(story_snapshot):
    graph = build_relationship_graph(story_snapshot, expand_bidirectional=True, filter_redundant=False)

    assert len(graph.edges) == 28
    assert _triples(graph.edges)[26:] == [
        ("c3", "c1", "rival", "old feud"),
        ("c1", "c2", "family", "sibling"),
    ]


def test_full_pipeline_drops_redundant_reciprocals(story_snapshot):
    graph = build_relationship_graph(story_snapshot, expand_bidirectional=True, filter_redundant=True)
    triples = _triples(graph.edges)

    assert len(triples) == 26
    assert ("i1", "c1", "neutral", "owned by") not in triples
    assert ("e1", "c1", "neutral", "involved") not in triples
    assert ("e1", "c2", "neutral", "involved") in triples
    assert ("c1", "i1", "neutral", "owns") in triples


def test_filter_only(story_snapshot):
    graph = build_relationship_graph(story_snapshot, expand_bidirectional=False, filter_redundant=True)

    assert len(graph.edges) == 24


def test_defaults_follow_configuration(story_snapshot, monkeypatch):
    monkeypatch.setattr(config, "GRAPH_EXPAND_BIDIRECTIONAL", False)
    monkeypatch.setattr(config, "GRAPH_FILTER_REDUNDANT_RECIPROCALS", False)

    assert len(build_relationship_graph(story_snapshot).edges) == 26

    monkeypatch.setattr(config, "GRAPH_EXPAND_BIDIRECTIONAL", True)
    monkeypatch.setattr(config, "GRAPH_FILTER_REDUNDANT_RECIPROCALS", True)

    assert len(build_relationship_graph(story_snapshot).edges) == 26
    assert len(build_relationship_graph(story_snapshot, filter_redundant=False).edges) == 28


def test_repeated_builds_are_equal(story_snapshot):
    first = build_relationship_graph(story_snapshot)
    second = build_relationship_graph(story_snapshot)

    assert first.to_dict() == second.to_dict()


def test_empty_snapshot():
    graph = build_relationship_graph(StorySnapshot())

    assert graph.nodes == {}
    assert graph.edges == []
