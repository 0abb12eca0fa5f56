"""
Orphan detection.

An orphan is a node that no edge touches. After visibility reduction
this catches nodes whose only edges were dropped or rewired away.
"""

import logging
from typing import Sequence, Set

from ..core.types import Edge, Node, ReducedGraph

logger = logging.getLogger(__name__)


def connected_node_ids(edges: Sequence[Edge]) -> Set[str]:
    connected: Set[str] = set()
    for edge in edges:
        connected.add(edge.source)
        connected.add(edge.target)
    return connected


def detect_orphans(nodes: Sequence[Node], edges: Sequence[Edge]) -> Set[str]:
    """Ids of nodes that appear as neither source nor target of any edge."""
    connected = connected_node_ids(edges)
    return {node.id for node in nodes if node.id not in connected}


def strip_orphans(nodes: Sequence[Node], edges: Sequence[Edge]) -> ReducedGraph:
    """Drop orphan nodes, keeping only edges whose endpoints both survive."""
    orphans = detect_orphans(nodes, edges)
    if orphans:
        logger.debug("Stripping %d orphan node(s)", len(orphans))

    kept_nodes = [node for node in nodes if node.id not in orphans]
    kept_edges = [
        edge for edge in edges
        if edge.source not in orphans and edge.target not in orphans
    ]
    return ReducedGraph(nodes=kept_nodes, edges=kept_edges)
