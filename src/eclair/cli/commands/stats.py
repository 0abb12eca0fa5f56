"""
Stats Command - Summarise an architecture graph.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ...core.graph import compute_stats, extract_domains, extract_node_types
from ..utils import load_graph, type_style

console = Console()


@click.command()
@click.argument("graph_file", default=".")
def stats(graph_file: str):
    """
    Show node, edge, domain and category counts.
    """
    graph = load_graph(graph_file)
    if graph is None:
        sys.exit(1)

    summary = compute_stats(graph)
    title = graph.metadata.name or graph_file

    console.print(f"📊 [bold]{title}[/bold]")
    console.print(f"   Nodes:    {summary.total_nodes}")
    console.print(f"   Edges:    {summary.total_edges}")
    console.print(f"   Domains:  {summary.total_domains}")
    console.print(f"   APIs:     {summary.total_apis}")
    console.print(f"   Entities: {summary.total_entities}")
    console.print(f"   Events:   {summary.total_events}")

    nodes = graph.all_nodes()

    domains = Table(title="Domains")
    domains.add_column("Domain")
    domains.add_column("Nodes", justify="right")
    for info in extract_domains(nodes):
        domains.add_row(info.name, str(info.node_count))
    console.print(domains)

    types = Table(title="Node types")
    types.add_column("Type")
    types.add_column("Nodes", justify="right")
    for info in extract_node_types(nodes):
        types.add_row(f"[{type_style(info.type)}]{info.type.value}[/]", str(info.node_count))
    console.print(types)
