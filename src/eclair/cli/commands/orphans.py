"""
Orphans Command - List nodes with no connections.
"""

import sys
from typing import Tuple

import click
from rich.console import Console
from rich.table import Table

from ...projection.orphans import detect_orphans
from ...projection.pipeline import default_visible_types
from ...projection.visibility import reduce_graph
from ..utils import echo_success, echo_warning, load_graph, parse_node_types

console = Console()


@click.command()
@click.argument("graph_file", default=".")
@click.option("--hide", "hidden", multiple=True, help="Node type to hide first (repeatable)")
def orphans(graph_file: str, hidden: Tuple[str, ...]):
    """
    List nodes that no edge touches.

    With --hide, reports the nodes a view would drop after reduction.
    """
    graph = load_graph(graph_file)
    if graph is None:
        sys.exit(1)

    nodes = graph.all_nodes()
    visible_types = default_visible_types(nodes) - parse_node_types(hidden)
    reduced = reduce_graph(nodes, graph.all_edges(), visible_types)

    orphan_ids = detect_orphans(reduced.nodes, reduced.edges)
    if not orphan_ids:
        echo_success("No orphan nodes")
        return

    noun = "node has" if len(orphan_ids) == 1 else "nodes have"
    echo_warning(f"{len(orphan_ids)} {noun} no connections")

    table = Table()
    table.add_column("Node")
    table.add_column("Type")
    table.add_column("Domain")
    for node in reduced.nodes:
        if node.id in orphan_ids:
            table.add_row(node.id, node.type.value, node.domain)
    console.print(table)
