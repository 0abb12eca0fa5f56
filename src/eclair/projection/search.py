"""
Node search built on flow tracing.
"""

from typing import Sequence, Set

from ..core.types import Edge, Node, SearchResult
from .flow import trace_flow


def node_matches_query(node: Node, query: str) -> bool:
    """Case-insensitive substring match on name, domain or category."""
    query_lower = query.lower()
    return (
        query_lower in node.name.lower()
        or query_lower in node.domain.lower()
        or query_lower in node.type.value.lower()
    )


def filter_nodes_by_search(query: str, nodes: Sequence[Node], edges: Sequence[Edge]) -> SearchResult:
    """
    Find matching nodes and everything in their flows.

    A blank query matches every node. No match leaves both sets empty.
    """
    trimmed = query.strip()

    if not trimmed:
        all_ids = {node.id for node in nodes}
        return SearchResult(matching_node_ids=all_ids, visible_node_ids=set(all_ids))

    matching = {node.id for node in nodes if node_matches_query(node, trimmed)}
    if not matching:
        return SearchResult()

    visible: Set[str] = set()
    for node_id in matching:
        visible |= trace_flow(node_id, edges).node_ids

    return SearchResult(matching_node_ids=matching, visible_node_ids=visible)
