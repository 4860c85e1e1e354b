# core/edge_postprocessing.py
"""Post-process synthesized edges: mirror symmetric relationships and drop
reciprocal edges that only restate a preferred-direction edge.

Both passes return new lists and leave their inputs untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from models.graph_constants import (
    BIDIRECTIONAL_RELATIONSHIP_TYPES,
    CANONICAL_NEUTRAL_RELATIONSHIP_RULE_SPECS,
)
from models.graph_models import CanonicalRule, EndpointPattern, GraphEdge, GraphNode

CANONICAL_NEUTRAL_RELATIONSHIP_RULES: tuple[CanonicalRule, ...] = tuple(
    CanonicalRule(
        preferred=EndpointPattern(source_type=preferred[0], target_type=preferred[1], label=preferred[2]),
        redundant=EndpointPattern(source_type=redundant[0], target_type=redundant[1], label=redundant[2]),
    )
    for preferred, redundant in CANONICAL_NEUTRAL_RELATIONSHIP_RULE_SPECS
)


def build_bidirectional_edges(edges: Iterable[GraphEdge]) -> list[GraphEdge]:
    """Add the mirror of every family, ally, rival and romantic edge.

    Every input edge is kept, duplicates included. A mirror (target -> source,
    same type and label) is only added when that exact edge is not already
    present, so the pass is idempotent.
    """
    result = list(edges)
    seen = {edge.identity for edge in result}
    for edge in result[:]:
        if edge.relationship_type not in BIDIRECTIONAL_RELATIONSHIP_TYPES:
            continue
        mirror = edge.reversed()
        if mirror.identity not in seen:
            seen.add(mirror.identity)
            result.append(mirror)
    return result


def _matches(
    edge: GraphEdge,
    pattern: EndpointPattern,
    node_index: Mapping[str, GraphNode],
) -> bool:
    if edge.relationship_type != "neutral" or edge.label != pattern.label:
        return False
    source_node = node_index.get(edge.source)
    target_node = node_index.get(edge.target)
    if source_node is None or target_node is None:
        return False
    return source_node.type == pattern.source_type and target_node.type == pattern.target_type


def filter_redundant_reciprocal_edges(
    edges: Sequence[GraphEdge],
    node_index: Mapping[str, GraphNode],
    rules: Sequence[CanonicalRule] = CANONICAL_NEUTRAL_RELATIONSHIP_RULES,
) -> list[GraphEdge]:
    """Drop neutral edges whose reverse already states the same fact.

    An edge is dropped when it matches a rule's ``redundant`` pattern and the
    list also holds the exact reverse edge (endpoints swapped) matching that
    rule's ``preferred`` pattern. Edges whose endpoints are not in
    ``node_index`` and non-neutral edges always pass through.
    """
    endpoints_by_rule: list[set[tuple[str, str]]] = [
        {(edge.source, edge.target) for edge in edges if _matches(edge, rule.preferred, node_index)}
        for rule in rules
    ]

    kept: list[GraphEdge] = []
    for edge in edges:
        redundant = any(
            _matches(edge, rule.redundant, node_index)
            and (edge.target, edge.source) in preferred_endpoints
            for rule, preferred_endpoints in zip(rules, endpoints_by_rule)
        )
        if not redundant:
            kept.append(edge)
    return kept
