"""
View Command - Show the projected view of an architecture graph.

Applies category hiding (with edge rewiring), orphan stripping and an
optional search, then lists what the viewer would display.

Usage:
    eclair view .riviere/graph.json --hide UseCase --hide DomainOp
    eclair view . --search orders
"""

import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from ...config import load_config
from ...core.errors import ConfigError
from ...projection.pipeline import default_visible_types, project_view, restrict_to
from ...projection.search import filter_nodes_by_search
from ..utils import echo_error, echo_warning, load_graph, parse_node_types, type_style

console = Console()


@click.command()
@click.argument("graph_file", default=".")
@click.option("--hide", "hidden", multiple=True, help="Node type to hide (repeatable)")
@click.option("-s", "--search", "query", default=None, help="Only show flows of nodes matching this text")
def view(graph_file: str, hidden: Tuple[str, ...], query: Optional[str]):
    """
    Show the nodes and edges a view displays.
    """
    try:
        config = load_config()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    graph = load_graph(graph_file)
    if graph is None:
        sys.exit(1)

    nodes = graph.all_nodes()
    edges = graph.all_edges()
    visible_types = default_visible_types(nodes) - parse_node_types(hidden) - set(config.hidden_types)

    projected = project_view(nodes, edges, visible_types)

    matching = set()
    if query is not None:
        found = filter_nodes_by_search(query, projected.nodes, projected.edges)
        if not found.matching_node_ids:
            echo_warning(f"No nodes match '{query}'")
            return
        matching = found.matching_node_ids
        projected = restrict_to(projected.nodes, projected.edges, found.visible_node_ids)

    table = Table(title=f"{len(projected.nodes)} nodes, {len(projected.edges)} edges")
    table.add_column("Node")
    table.add_column("Type")
    table.add_column("Domain")
    for node in projected.nodes:
        name = f"[bold]{node.name}[/bold]" if node.id in matching else node.name
        table.add_row(name, f"[{type_style(node.type)}]{node.type.value}[/]", node.domain)
    console.print(table)

    for edge in projected.edges:
        arrow = "⇢" if edge.is_async() else "→"
        console.print(f"  {edge.source} {arrow} {edge.target}", highlight=False)
