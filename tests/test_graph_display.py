"""Tests for graph colour and shape lookups."""

import pytest

from core.graph_display import get_entity_shape, get_relationship_color


@pytest.mark.parametrize(
    ("relationship_type", "color"),
    [("ally", "#4ade80"), ("enemy", "#ef4444"), ("custom", "#eab308"), ("neutral", "#64748b")],
)
def test_known_relationship_colors(relationship_type, color):
    assert get_relationship_color(relationship_type) == color


def test_unknown_relationship_falls_back_to_neutral():
    assert get_relationship_color("frenemy") == "#64748b"


@pytest.mark.parametrize(
    ("kind", "shape"),
    [("location", "round-rectangle"), ("item", "round-hexagon"), ("magicsystem", "star")],
)
def test_known_entity_shapes(kind, shape):
    assert get_entity_shape(kind) == shape


def test_unknown_kind_falls_back_to_ellipse():
    assert get_entity_shape("spaceship") == "ellipse"


def test_tag_spelling_is_not_a_kind():
    assert get_entity_shape("magicSystem") == "ellipse"
