"""
View composition.

Runs the projections in the order the view depends on: visibility
reduction, then orphan stripping, then an optional narrowing to a
search or highlight set. The result is what the layout step receives.
"""

import logging
from typing import Iterable, Optional, Sequence, Set

from ..core.types import Edge, Node, NodeType, ReducedGraph
from .orphans import strip_orphans
from .visibility import reduce_graph

logger = logging.getLogger(__name__)


def default_visible_types(nodes: Iterable[Node]) -> Set[NodeType]:
    """Every category present in the graph."""
    return {node.type for node in nodes}


def restrict_to(nodes: Sequence[Node], edges: Sequence[Edge], node_ids: Set[str]) -> ReducedGraph:
    """Keep the given nodes and the edges running between them."""
    return ReducedGraph(
        nodes=[node for node in nodes if node.id in node_ids],
        edges=[edge for edge in edges if edge.source in node_ids and edge.target in node_ids],
    )


def project_view(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    visible_types: Optional[Iterable[NodeType]] = None,
    visible_node_ids: Optional[Set[str]] = None,
) -> ReducedGraph:
    """
    Produce the node/edge set a view displays.

    visible_types defaults to every category present; visible_node_ids,
    when given, narrows the result after orphans are gone.
    """
    if visible_types is None:
        visible_types = default_visible_types(nodes)

    reduced = reduce_graph(nodes, edges, visible_types)
    view = strip_orphans(reduced.nodes, reduced.edges)

    if visible_node_ids is not None:
        view = restrict_to(view.nodes, view.edges, visible_node_ids)

    logger.debug("Projected view: %d nodes, %d edges", len(view.nodes), len(view.edges))
    return view
