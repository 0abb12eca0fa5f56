"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, graph loading and option parsing used across the
eclair commands.
"""

from typing import Iterable, Optional, Set

import click

from ..core.graph import ArchitectureGraph, load_graph_file
from ..core.types import NodeType


def echo_success(message: str) -> None:
    """Print a success message with a green checkmark."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Print an error message with a red cross to stderr."""
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def load_graph(graph_file: str) -> Optional[ArchitectureGraph]:
    """
    Load a graph file or a directory containing .riviere/graph.json.

    Prints the reason and returns None when loading fails.
    """
    result = load_graph_file(graph_file)
    if result.is_err():
        echo_error(str(result.error))
        return None
    return result.unwrap()


def parse_node_types(values: Iterable[str]) -> Set[NodeType]:
    """
    Convert category names from the command line, case-insensitively.

    Raises click.BadParameter for unknown names.
    """
    by_lower = {t.value.lower(): t for t in NodeType}
    types: Set[NodeType] = set()
    for value in values:
        node_type = by_lower.get(value.lower())
        if node_type is None:
            choices = ", ".join(t.value for t in NodeType)
            raise click.BadParameter(f"Unknown node type '{value}'. Choose from: {choices}")
        types.add(node_type)
    return types


def type_style(node_type: NodeType) -> str:
    """Rich style per category, following the viewer's palette."""
    return {
        NodeType.UI: "#F43F5E",
        NodeType.API: "#0D9488",
        NodeType.USE_CASE: "#A78BFA",
        NodeType.DOMAIN_OP: "#06B6D4",
        NodeType.EVENT: "#F59E0B",
        NodeType.EVENT_HANDLER: "#EAB308",
        NodeType.CUSTOM: "#78716C",
        NodeType.EXTERNAL: "#94A3B8",
    }[node_type]
