"""
Core modules for eclair.

This package contains the fundamental building blocks:
- types: Data structures (Node, Edge, transforms, results)
- graph: The persisted architecture graph and its catalogues
- errors: Exceptions raised on broken preconditions
"""

from .errors import ConfigError, EclairError, InvalidViewportError, MissingPositionError
from .graph import ArchitectureGraph, compute_stats, extract_domains, extract_node_types
from .result import Err, LoadFailure, Ok, Result
from .types import (
    Edge, ExternalLink, FlowKind, FlowResult, Node, NodeType,
    ReducedGraph, SearchResult, ViewportTransform, edge_key,
)

__all__ = [
    # Types
    "Node", "Edge", "NodeType", "FlowKind", "ExternalLink", "edge_key",
    "ReducedGraph", "FlowResult", "SearchResult", "ViewportTransform",
    # Graph
    "ArchitectureGraph", "compute_stats", "extract_domains", "extract_node_types",
    # Errors
    "EclairError", "MissingPositionError", "InvalidViewportError", "ConfigError",
    "Ok", "Err", "Result", "LoadFailure",
]
