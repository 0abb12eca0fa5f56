"""
Layered layout.

A small stand-in for the interactive viewer's layout library: nodes are
ranked left to right by depth and stacked top to bottom within a rank.
Deterministic for a given input, which makes transforms reproducible.
"""

from collections import defaultdict
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .config import ViewConfig
from .core.types import Edge, Node
from .projection.depth import calculate_node_depths

Position = Tuple[float, float]

NODE_SIZE = 64.0


def layered_layout(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    config: Optional[ViewConfig] = None,
) -> Dict[str, Position]:
    """Assign a centre position to every node."""
    config = config or ViewConfig()
    depths = calculate_node_depths([node.id for node in nodes], edges)

    ranks: Dict[int, List[str]] = defaultdict(list)
    for node in nodes:
        ranks[depths[node.id]].append(node.id)

    positions: Dict[str, Position] = {}
    for rank, node_ids in ranks.items():
        x = config.margin + NODE_SIZE / 2 + rank * (NODE_SIZE + config.rank_sep)
        for index, node_id in enumerate(node_ids):
            y = config.margin + NODE_SIZE / 2 + index * (NODE_SIZE + config.node_sep)
            positions[node_id] = (x, y)
    return positions


def apply_positions(nodes: Sequence[Node], positions: Mapping[str, Position]) -> List[Node]:
    """
    Copy layout positions onto nodes.

    Nodes missing from positions are returned unpositioned.
    """
    positioned: List[Node] = []
    for node in nodes:
        pos = positions.get(node.id)
        positioned.append(node.with_position(*pos) if pos is not None else node)
    return positioned
