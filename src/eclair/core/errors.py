"""
Exception hierarchy for eclair.

Only precondition violations raise. Absence of data (an unknown domain,
a node with no edges) is represented in return values instead.
"""


class EclairError(Exception):
    """Base class for all eclair errors."""


class MissingPositionError(EclairError):
    """A node reached the viewport calculation without layout coordinates."""

    def __init__(self, node_id: str, axis: str):
        self.node_id = node_id
        self.axis = axis
        super().__init__(f"Node {node_id} missing layout {axis} coordinate")


class InvalidViewportError(EclairError):
    """Viewport dimensions must both be positive."""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        super().__init__(f"Viewport must have positive size, got {width}x{height}")


class ConfigError(EclairError):
    """Configuration file or environment override could not be applied."""
