"""
Fit Command - Compute the viewport transform for a projected view.

Positions come from a layout file (JSON object mapping node id to
[x, y]) or, by default, from the built-in layered layout.

Usage:
    eclair fit . --width 1600 --height 900
    eclair fit . --domain orders --positions layout.json --json
"""

import json
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import click

from ...config import load_config
from ...core.errors import ConfigError, EclairError
from ...layout import Position, apply_positions, layered_layout
from ...projection.pipeline import default_visible_types, project_view
from ...projection.viewport import fit_all, fit_domain
from ..utils import echo_error, echo_warning, load_graph, parse_node_types


def _read_positions(path: str) -> Dict[str, Position]:
    data = json.loads(Path(path).read_text())
    return {node_id: (float(xy[0]), float(xy[1])) for node_id, xy in data.items()}


@click.command()
@click.argument("graph_file", default=".")
@click.option("-d", "--domain", default=None, help="Zoom onto the nodes of one domain")
@click.option("--width", type=float, default=None, help="Viewport width in pixels")
@click.option("--height", type=float, default=None, help="Viewport height in pixels")
@click.option("--hide", "hidden", multiple=True, help="Node type to hide (repeatable)")
@click.option("-p", "--positions", "positions_file", default=None,
              type=click.Path(exists=True, dir_okay=False),
              help="JSON file mapping node id to [x, y]")
@click.option("--json", "json_mode", is_flag=True, help="Output the transform as JSON")
def fit(graph_file: str, domain: Optional[str], width: Optional[float], height: Optional[float],
        hidden: Tuple[str, ...], positions_file: Optional[str], json_mode: bool):
    """
    Compute the scale and translation that fit the view on screen.
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
    visible_types = default_visible_types(nodes) - parse_node_types(hidden) - set(config.hidden_types)
    projected = project_view(nodes, graph.all_edges(), visible_types)

    if positions_file:
        try:
            positions = _read_positions(positions_file)
        except (ValueError, TypeError, IndexError, AttributeError) as e:
            echo_error(f"Failed to read positions: {e}")
            sys.exit(1)
    else:
        positions = layered_layout(projected.nodes, projected.edges, config)

    positioned = apply_positions(projected.nodes, positions)
    vw = width if width is not None else config.viewport_width
    vh = height if height is not None else config.viewport_height

    try:
        if domain is None:
            transform = fit_all(positioned, vw, vh, config.fit_padding)
        else:
            transform = fit_domain(positioned, domain, vw, vh)
    except EclairError as e:
        echo_error(str(e))
        sys.exit(1)

    if transform is None:
        if json_mode:
            click.echo(json.dumps(None))
        else:
            echo_warning(f"No nodes in domain '{domain}'")
        return

    if json_mode:
        click.echo(transform.model_dump_json())
        return

    click.echo(f"translate: ({transform.translate_x:.2f}, {transform.translate_y:.2f})")
    click.echo(f"scale:     {transform.scale:.4f}")
