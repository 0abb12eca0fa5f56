"""
Diff Command - Compare two versions of an architecture graph.

Usage:
    eclair diff old/graph.json .riviere/graph.json
    eclair diff old.json new.json --json
"""

import json
import sys
from dataclasses import asdict

import click
from rich.console import Console

from ...projection.compare import ChangeType, compare_graphs, compute_domain_connection_diff
from ..utils import echo_success, load_graph

console = Console()


@click.command()
@click.argument("old_file")
@click.argument("new_file")
@click.option("--json", "json_mode", is_flag=True, help="Output the changes as JSON")
def diff(old_file: str, new_file: str, json_mode: bool):
    """
    Show components, links and domain connections that changed.
    """
    before = load_graph(old_file)
    after = load_graph(new_file)
    if before is None or after is None:
        sys.exit(1)

    changes = compare_graphs(before, after)
    connections = compute_domain_connection_diff(before, after)

    if json_mode:
        click.echo(json.dumps({
            "stats": asdict(changes.stats),
            "nodes": {
                "added": [n.id for n in changes.nodes.added],
                "removed": [n.id for n in changes.nodes.removed],
                "modified": {m.after.id: m.changed_fields for m in changes.nodes.modified},
            },
            "edges": {
                "added": [e.key for e in changes.edges.added],
                "removed": [e.key for e in changes.edges.removed],
                "modified": {m.after.key: m.changed_fields for m in changes.edges.modified},
            },
            "domain_connections": {
                "added": [c.key for c in connections.added],
                "removed": [c.key for c in connections.removed],
            },
        }, indent=2))
        return

    stats = changes.stats
    if not stats.has_changes and not connections.added and not connections.removed:
        echo_success("No changes")
        return

    console.print("📊 [bold]Graph changes[/bold]")
    console.print(f"   Nodes: +{stats.nodes_added} -{stats.nodes_removed} ~{stats.nodes_modified}")
    console.print(f"   Edges: +{stats.edges_added} -{stats.edges_removed} ~{stats.edges_modified}")

    lines = []
    for node in changes.nodes.added:
        lines.append(f"{ChangeType.ADDED.icon} {node.type.value}: {node.id}")
    for node in changes.nodes.removed:
        lines.append(f"{ChangeType.REMOVED.icon} {node.type.value}: {node.id}")
    for change in changes.nodes.modified:
        fields = ", ".join(change.changed_fields)
        lines.append(f"{ChangeType.MODIFIED.icon} {change.after.type.value}: {change.after.id} ({fields})")
    for edge in changes.edges.added:
        lines.append(f"{ChangeType.ADDED.icon} {edge.key}")
    for edge in changes.edges.removed:
        lines.append(f"{ChangeType.REMOVED.icon} {edge.key}")
    for change in changes.edges.modified:
        kinds = f"{change.before.type or 'unknown'} -> {change.after.type or 'unknown'}"
        lines.append(f"{ChangeType.MODIFIED.icon} {change.after.key} ({kinds})")
    for connection in connections.added:
        lines.append(f"{ChangeType.ADDED.icon} domain {connection.key}")
    for connection in connections.removed:
        lines.append(f"{ChangeType.REMOVED.icon} domain {connection.key}")

    for line in lines:
        console.print(f"   {line}", highlight=False)
