"""
Domains Command - Show how domains call each other.

Usage:
    eclair domains .
    eclair domains . --domain orders
    eclair domains . --json
"""

import json
import sys
from dataclasses import asdict
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...projection.domain_map import connected_domains, extract_domain_map
from ..utils import echo_warning, load_graph

console = Console()


@click.command()
@click.argument("graph_file", default=".")
@click.option("-d", "--domain", default=None, help="Only show connections of this domain")
@click.option("--json", "json_mode", is_flag=True, help="Output the domain map as JSON")
def domains(graph_file: str, domain: Optional[str], json_mode: bool):
    """
    Show cross-domain connections.

    Each connection aggregates the component links from one domain into
    another, counting API calls and events.
    """
    graph = load_graph(graph_file)
    if graph is None:
        sys.exit(1)

    domain_map = extract_domain_map(graph)
    connections = domain_map.connections
    externals = domain_map.external_connections

    if domain is not None:
        if domain not in dict(domain_map.domains):
            echo_warning(f"No nodes in domain '{domain}'")
            return
        connections = [c for c in connections if domain in (c.source, c.target)]
        externals = [e for e in externals if e.source_domain == domain]

    if json_mode:
        payload = asdict(domain_map)
        payload["connections"] = [asdict(c) for c in connections]
        payload["external_connections"] = [asdict(e) for e in externals]
        click.echo(json.dumps(payload, indent=2))
        return

    if domain is not None:
        linked = sorted(connected_domains(domain, domain_map))
        console.print(f"🔗 [bold]{domain}[/bold] connects to: {', '.join(linked) or 'nothing'}")
    else:
        table = Table(title="Domains")
        table.add_column("Domain")
        table.add_column("Nodes", justify="right")
        for name, count in domain_map.domains:
            table.add_row(name, str(count))
        console.print(table)

    if connections:
        table = Table(title="Connections")
        table.add_column("From")
        table.add_column("To")
        table.add_column("Calls")
        table.add_column("Links", justify="right")
        for connection in connections:
            table.add_row(
                connection.source,
                connection.target,
                connection.label or "-",
                str(len(connection.connections)),
            )
        console.print(table)

    if externals:
        table = Table(title="External systems")
        table.add_column("From")
        table.add_column("System")
        table.add_column("Links", justify="right")
        for external in externals:
            table.add_row(external.source_domain, external.target_name, str(external.connection_count))
        console.print(table)
