"""
Visibility reduction.

Hides node categories from the view while preserving perceived
connectivity: an edge from a visible node into a hidden one is rewired
forward, through chains of hidden nodes, to every visible node they reach.

Rewiring only runs forward. An edge whose source is hidden is dropped,
even when a visible predecessor exists further upstream.
"""

import logging
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.types import Edge, Node, NodeType, ReducedGraph, edge_key

logger = logging.getLogger(__name__)


def build_outgoing_edges(edges: Iterable[Edge]) -> Dict[str, List[Edge]]:
    """Index edges by source id, preserving input order."""
    outgoing: Dict[str, List[Edge]] = defaultdict(list)
    for edge in edges:
        outgoing[edge.source].append(edge)
    return outgoing


def find_visible_descendants(
    node_id: str,
    visible_ids: Set[str],
    outgoing: Dict[str, List[Edge]],
    visited: FrozenSet[str] = frozenset(),
) -> List[Tuple[str, Edge]]:
    """
    Find every visible node reachable from a hidden node.

    Returns (visible target id, last-hop edge) pairs in discovery order.

    visited holds the nodes on the current path only. Each branch gets
    its own copy, so two paths converging through the same hidden node
    are both explored while cycles still terminate.

    The walk uses an explicit stack. An item is either a hidden node to
    expand (hop is None) or a visible target found through hop. Children
    are pushed in reverse so they pop in edge order, depth first.
    """
    descendants: List[Tuple[str, Edge]] = []
    stack: List[Tuple[str, FrozenSet[str], Optional[Edge]]] = [(node_id, visited, None)]

    while stack:
        current, path, hop = stack.pop()
        if hop is not None:
            descendants.append((current, hop))
            continue
        if current in path or current in visible_ids:
            continue

        branch = path | {current}
        for edge in reversed(outgoing.get(current, [])):
            found = edge if edge.target in visible_ids else None
            stack.append((edge.target, branch, found))

    return descendants


def reduce_graph(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    visible_types: Iterable[NodeType],
) -> ReducedGraph:
    """
    Filter nodes by category and rewire edges across the hidden ones.

    - Both endpoints visible: the edge is kept unchanged.
    - Source visible, target hidden: one edge per visible node reachable
      forward from the target, carrying the flow kind of the last hop.
      Rewired edges are deduplicated per (source, target) pair; the first
      discovered last hop decides the flow kind.
    - Source hidden: the edge is dropped.

    Node order is preserved. Inputs are never mutated.
    """
    visible_types = set(visible_types)
    visible_nodes = [node for node in nodes if node.type in visible_types]
    visible_ids = {node.id for node in visible_nodes}

    outgoing = build_outgoing_edges(edges)

    reduced_edges: List[Edge] = []
    added_pairs: Set[str] = set()
    kept = rewired = dropped = 0

    for edge in edges:
        source_visible = edge.source in visible_ids
        target_visible = edge.target in visible_ids

        if source_visible and target_visible:
            reduced_edges.append(edge)
            kept += 1
            continue

        if not source_visible:
            dropped += 1
            continue

        for target_id, last_hop in find_visible_descendants(edge.target, visible_ids, outgoing):
            key = edge_key(edge.source, target_id)
            if key in added_pairs:
                continue
            added_pairs.add(key)
            reduced_edges.append(Edge(source=edge.source, target=target_id, type=last_hop.type))
            rewired += 1

    logger.debug(
        "Reduced %d nodes to %d: kept %d edges, rewired %d, dropped %d",
        len(nodes), len(visible_nodes), kept, rewired, dropped,
    )
    return ReducedGraph(nodes=visible_nodes, edges=reduced_edges)
