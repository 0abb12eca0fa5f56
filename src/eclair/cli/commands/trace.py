"""
Trace Command - Show the upstream and downstream flow of a node.
"""

import sys
from typing import Tuple

import click
from rich.console import Console
from rich.tree import Tree

from ...projection.flow import trace_flow
from ...projection.pipeline import default_visible_types, project_view
from ..utils import echo_warning, load_graph, parse_node_types, type_style

console = Console()


@click.command()
@click.argument("graph_file")
@click.argument("node_id")
@click.option("--hide", "hidden", multiple=True, help="Node type to hide before tracing (repeatable)")
def trace(graph_file: str, node_id: str, hidden: Tuple[str, ...]):
    """
    Trace the flow through NODE_ID.

    Lists the node's upstream causes, its downstream effects, and
    everything else those causes trigger.
    """
    graph = load_graph(graph_file)
    if graph is None:
        sys.exit(1)

    nodes = graph.all_nodes()
    visible_types = default_visible_types(nodes) - parse_node_types(hidden)
    projected = project_view(nodes, graph.all_edges(), visible_types)

    by_id = {node.id: node for node in projected.nodes}
    if not graph.has_node(node_id):
        echo_warning(f"Node '{node_id}' is not in the graph")
    elif node_id not in by_id:
        echo_warning(f"Node '{node_id}' is hidden from this view")

    flow = trace_flow(node_id, projected.edges)

    tree = Tree(f"🔗 [bold]{node_id}[/bold] ({len(flow.node_ids)} nodes, {len(flow.edge_keys)} edges)")
    nodes_branch = tree.add("Nodes")
    for member in sorted(flow.node_ids):
        node = by_id.get(member)
        if node is None:
            nodes_branch.add(member)
        else:
            nodes_branch.add(f"[{type_style(node.type)}]{node.name}[/] [dim]{member}[/dim]")

    if flow.edge_keys:
        edges_branch = tree.add("Edges")
        for key in sorted(flow.edge_keys):
            edges_branch.add(key)

    console.print(tree)
