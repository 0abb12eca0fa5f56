"""
Core type definitions for eclair.

Nodes and edges are immutable values: every projection returns new
collections and never mutates what it was given.
"""

from enum import StrEnum
from typing import List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field


class NodeType(StrEnum):
    """Categories of components in the architecture graph."""
    UI = "UI"
    API = "API"
    USE_CASE = "UseCase"
    DOMAIN_OP = "DomainOp"
    EVENT = "Event"
    EVENT_HANDLER = "EventHandler"
    CUSTOM = "Custom"
    EXTERNAL = "External"


class FlowKind(StrEnum):
    """How a call travels along an edge."""
    SYNC = "sync"
    ASYNC = "async"


def edge_key(source: str, target: str) -> str:
    """Key used to identify an edge in flow results."""
    return f"{source}->{target}"


class Node(BaseModel):
    """
    A component of the architecture.

    Coordinates are optional; they are assigned by the layout step.
    """
    id: str
    name: str
    type: NodeType
    domain: str
    module: Optional[str] = None
    description: Optional[str] = None
    entity: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        if self.x is None or self.y is None:
            return None
        return (self.x, self.y)

    def with_position(self, x: float, y: float) -> "Node":
        return self.model_copy(update={"x": x, "y": y})


class Edge(BaseModel):
    """
    Directed call between two components.
    """
    source: str
    target: str
    type: Optional[FlowKind] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def key(self) -> str:
        return edge_key(self.source, self.target)

    def is_async(self) -> bool:
        return self.type == FlowKind.ASYNC


class ExternalTarget(BaseModel):
    """A system outside the graph that a component calls."""
    name: str
    domain: Optional[str] = None
    repository: Optional[str] = None
    url: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class ExternalLink(BaseModel):
    """Call from a component to an external system."""
    source: str
    target: ExternalTarget
    type: Optional[FlowKind] = None
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class ReducedGraph(BaseModel):
    """A node/edge pair produced by a projection."""
    nodes: List[Node] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    def node_ids(self) -> Set[str]:
        return {node.id for node in self.nodes}


class FlowResult(BaseModel):
    """Nodes and edge keys participating in a traced flow."""
    node_ids: Set[str] = Field(default_factory=set)
    edge_keys: Set[str] = Field(default_factory=set)


class SearchResult(BaseModel):
    """
    Result of a text search.

    matching_node_ids are the direct hits; visible_node_ids adds the
    flow of every hit.
    """
    matching_node_ids: Set[str] = Field(default_factory=set)
    visible_node_ids: Set[str] = Field(default_factory=set)


class ViewportTransform(BaseModel):
    """Scale and translation mapping graph space to viewport pixels."""
    translate_x: float
    translate_y: float
    scale: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def identity(cls) -> "ViewportTransform":
        return cls(translate_x=0.0, translate_y=0.0, scale=1.0)
