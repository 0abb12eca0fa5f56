"""
Eclair - architecture graph projection engine.

Turns a full architecture graph (API endpoints, use cases, domain
operations, events, handlers, UI routes) into the reduced, traceable,
positioned view a user explores.

Key Components:
- core: Data types and the graph document
- projection: Visibility reduction, flow tracing, orphan detection, viewport fitting
- layout: Layered positions for the projected view

Usage:
    from eclair import NodeType
    from eclair.core.graph import load_graph_file
    from eclair.projection import project_view, trace_flow

    graph = load_graph_file(".riviere/graph.json").unwrap()
    view = project_view(graph.all_nodes(), graph.all_edges(), {NodeType.API, NodeType.EVENT})
    flow = trace_flow("orders:api:place-order", view.edges)
"""

__version__ = "0.1.0"

from .core.types import (
    Edge, FlowKind, FlowResult, Node, NodeType, ReducedGraph, ViewportTransform,
)

__all__ = [
    "__version__",
    "Node",
    "Edge",
    "NodeType",
    "FlowKind",
    "FlowResult",
    "ReducedGraph",
    "ViewportTransform",
]
