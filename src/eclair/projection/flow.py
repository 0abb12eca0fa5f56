"""
Flow tracing.

The flow of a node is everything downstream of it, everything upstream
of it, and every downstream branch of each upstream node. Tracing from
the middle of a pipeline therefore shows its cause and everything that
cause also triggers, not just direct neighbours.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Set

from ..core.types import Edge, FlowResult

logger = logging.getLogger(__name__)


def trace_flow(start_id: str, edges: Sequence[Edge]) -> FlowResult:
    """
    Trace the upstream and downstream flow of a node.

    Two walks share the result and two visited marks:
    - forward: from a node, follow outgoing edges.
    - backward: from a node, follow incoming edges; every source reached
      is also walked forward.

    The start node is always part of the result, even with no edges.
    Both walks use explicit stacks so arbitrarily long chains and cycles
    terminate without touching the recursion limit.
    """
    outgoing: Dict[str, List[Edge]] = defaultdict(list)
    incoming: Dict[str, List[Edge]] = defaultdict(list)
    for edge in edges:
        outgoing[edge.source].append(edge)
        incoming[edge.target].append(edge)

    node_ids: Set[str] = {start_id}
    edge_keys: Set[str] = set()
    visited_forward: Set[str] = set()
    visited_backward: Set[str] = set()

    def traverse_forward(node_id: str) -> None:
        stack = [node_id]
        while stack:
            current = stack.pop()
            if current in visited_forward:
                continue
            visited_forward.add(current)
            for edge in outgoing.get(current, []):
                node_ids.add(edge.target)
                edge_keys.add(edge.key)
                stack.append(edge.target)

    def traverse_backward(node_id: str) -> None:
        stack = [node_id]
        while stack:
            current = stack.pop()
            if current in visited_backward:
                continue
            visited_backward.add(current)
            for edge in incoming.get(current, []):
                node_ids.add(edge.source)
                edge_keys.add(edge.key)
                stack.append(edge.source)
                traverse_forward(edge.source)

    traverse_forward(start_id)
    traverse_backward(start_id)

    logger.debug("Traced %s: %d nodes, %d edges", start_id, len(node_ids), len(edge_keys))
    return FlowResult(node_ids=node_ids, edge_keys=edge_keys)
