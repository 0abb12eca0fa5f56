"""
Viewport transforms.

Computes the scale and translation that fit a set of positioned nodes
inside a viewport, either the whole set or the nodes of one domain.

Positions come from the layout step. A node without coordinates is a
broken precondition and raises MissingPositionError; substituting a
default would silently skew every later transform.
"""

import math
from typing import List, Optional, Sequence, Tuple

from ..core.errors import InvalidViewportError, MissingPositionError
from ..core.types import Node, ViewportTransform

DEFAULT_FIT_PADDING = 80.0

# Margin added on each side of a focused domain's bounding box
DOMAIN_FOCUS_MARGIN = 100.0

MAX_FIT_SCALE = 1.0
MAX_FOCUS_SCALE = 2.5


def extract_coordinates(nodes: Sequence[Node], axis: str) -> List[float]:
    """Collect one coordinate axis ('x' or 'y'), failing on unpositioned nodes."""
    values: List[float] = []
    for node in nodes:
        value = node.x if axis == "x" else node.y
        if value is None:
            raise MissingPositionError(node.id, axis)
        values.append(value)
    return values


def _bounds(nodes: Sequence[Node]) -> Tuple[float, float, float, float]:
    xs = extract_coordinates(nodes, "x")
    ys = extract_coordinates(nodes, "y")
    return min(xs), max(xs), min(ys), max(ys)


def _check_viewport(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise InvalidViewportError(width, height)


def _ratio(available: float, extent: float) -> float:
    # A zero-extent axis places no constraint on the scale
    if extent <= 0:
        return math.inf
    return available / extent


def fit_all(
    nodes: Sequence[Node],
    width: float,
    height: float,
    padding: float = DEFAULT_FIT_PADDING,
) -> ViewportTransform:
    """
    Fit every node inside the viewport.

    The bounding box is grown by padding on each side, scaled down to fit
    (never up past 1) and centred. No nodes gives the identity transform.
    """
    _check_viewport(width, height)
    if not nodes:
        return ViewportTransform.identity()

    min_x, max_x, min_y, max_y = _bounds(nodes)
    min_x -= padding
    max_x += padding
    min_y -= padding
    max_y += padding

    graph_width = max_x - min_x
    graph_height = max_y - min_y
    scale = min(_ratio(width, graph_width), _ratio(height, graph_height), MAX_FIT_SCALE)

    return ViewportTransform(
        translate_x=(width - graph_width * scale) / 2 - min_x * scale,
        translate_y=(height - graph_height * scale) / 2 - min_y * scale,
        scale=scale,
    )


def fit_domain(
    nodes: Sequence[Node],
    domain: str,
    width: float,
    height: float,
) -> Optional[ViewportTransform]:
    """
    Zoom onto the nodes of one domain.

    Returns None when no node belongs to the domain. Focusing is expected
    to zoom in, so the scale cap is 2.5 rather than 1.
    """
    _check_viewport(width, height)
    focused = [node for node in nodes if node.domain == domain]
    if not focused:
        return None

    min_x, max_x, min_y, max_y = _bounds(focused)

    center_x = (min_x + max_x) / 2
    center_y = (min_y + max_y) / 2
    box_width = max_x - min_x + 2 * DOMAIN_FOCUS_MARGIN
    box_height = max_y - min_y + 2 * DOMAIN_FOCUS_MARGIN

    scale = min(width / box_width, height / box_height, MAX_FOCUS_SCALE)

    return ViewportTransform(
        translate_x=width / 2 - center_x * scale,
        translate_y=height / 2 - center_y * scale,
        scale=scale,
    )
