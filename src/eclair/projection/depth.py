"""
Node depth: the length of the longest chain of calls leading into a node.

Entry points (no incoming edges) sit at depth 0. Nodes on a cycle are
collapsed into one strongly connected component and share its depth, so
the ranking is a longest-path pass over an acyclic condensation.
"""

from typing import Dict, Sequence

import networkx as nx

from ..core.types import Edge


def build_digraph(node_ids: Sequence[str], edges: Sequence[Edge]) -> nx.DiGraph:
    """Directed graph over the given ids plus every edge endpoint."""
    graph = nx.DiGraph()
    graph.add_nodes_from(node_ids)
    graph.add_edges_from((edge.source, edge.target) for edge in edges)
    return graph


def calculate_node_depths(node_ids: Sequence[str], edges: Sequence[Edge]) -> Dict[str, int]:
    graph = build_digraph(node_ids, edges)
    condensed = nx.condensation(graph)
    component_of = condensed.graph["mapping"]

    component_depth: Dict[int, int] = {}
    for component in nx.topological_sort(condensed):
        component_depth[component] = max(
            (component_depth[pred] + 1 for pred in condensed.predecessors(component)),
            default=0,
        )

    return {node_id: component_depth[component_of[node_id]] for node_id in node_ids}
