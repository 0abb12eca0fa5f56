"""
Architecture graph document.

Wraps the persisted graph file (components, links, external links) and
derives the catalogues the viewer needs: the full node/edge set including
synthetic External nodes, domain and category counts, and summary stats.

No well-formedness validation happens here beyond field shapes. Edges
whose endpoints do not exist are kept; the projections simply never
match them.
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .result import Err, LoadFailure, Ok, Result, and_then
from .types import Edge, ExternalLink, Node, NodeType

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_PATH = ".riviere/graph.json"
EXTERNAL_DOMAIN = "external"


class DomainMetadata(BaseModel):
    description: str = ""
    system_type: str = Field(default="other", alias="systemType")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class GraphMetadata(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    generated: Optional[str] = None
    domains: Dict[str, DomainMetadata] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")


class DomainInfo(BaseModel):
    name: str
    node_count: int


class NodeTypeInfo(BaseModel):
    type: NodeType
    node_count: int


class GraphStats(BaseModel):
    total_nodes: int
    total_domains: int
    total_apis: int
    total_entities: int
    total_events: int
    total_edges: int


def external_node_id(name: str) -> str:
    return f"external:{name}"


def create_external_nodes(external_links: Iterable[ExternalLink]) -> List[Node]:
    """
    Build one External node per distinct target name.

    Order follows the first appearance of each name.
    """
    seen: set = set()
    nodes: List[Node] = []
    for link in external_links:
        name = link.target.name
        if name in seen:
            continue
        seen.add(name)
        nodes.append(Node(
            id=external_node_id(name),
            name=name,
            type=NodeType.EXTERNAL,
            domain=EXTERNAL_DOMAIN,
        ))
    return nodes


def create_external_edges(external_links: Iterable[ExternalLink]) -> List[Edge]:
    """Build one edge per external link, pointing at the synthetic node."""
    return [
        Edge(source=link.source, target=external_node_id(link.target.name), type=link.type)
        for link in external_links
    ]


class ArchitectureGraph(BaseModel):
    """
    The persisted architecture graph.

    components and links are the internal graph; external_links point at
    systems outside it and are materialised as External nodes on demand.
    """
    version: str = "1.0"
    metadata: GraphMetadata = Field(default_factory=GraphMetadata)
    components: List[Node] = Field(default_factory=list)
    links: List[Edge] = Field(default_factory=list)
    external_links: List[ExternalLink] = Field(default_factory=list, alias="externalLinks")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def all_nodes(self) -> List[Node]:
        """Components followed by synthetic External nodes."""
        return [*self.components, *create_external_nodes(self.external_links)]

    def all_edges(self) -> List[Edge]:
        """Links followed by edges into External nodes."""
        return [*self.links, *create_external_edges(self.external_links)]

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.all_nodes():
            if node.id == node_id:
                return node
        return None

    def has_node(self, node_id: str) -> bool:
        return self.get_node(node_id) is not None


def extract_domains(nodes: Iterable[Node]) -> List[DomainInfo]:
    """Domains with their node counts, sorted by name."""
    counts = Counter(node.domain for node in nodes)
    return [
        DomainInfo(name=name, node_count=count)
        for name, count in sorted(counts.items())
    ]


def extract_node_types(nodes: Iterable[Node]) -> List[NodeTypeInfo]:
    """Categories present with their node counts, sorted by category name."""
    counts = Counter(node.type for node in nodes)
    return [
        NodeTypeInfo(type=node_type, node_count=count)
        for node_type, count in sorted(counts.items(), key=lambda item: item[0].value)
    ]


def compute_stats(graph: ArchitectureGraph) -> GraphStats:
    entities = {
        node.entity for node in graph.components
        if node.type == NodeType.DOMAIN_OP and node.entity is not None
    }
    return GraphStats(
        total_nodes=len(graph.components),
        total_domains=len(graph.metadata.domains),
        total_apis=sum(1 for n in graph.components if n.type == NodeType.API),
        total_entities=len(entities),
        total_events=sum(1 for n in graph.components if n.type == NodeType.EVENT),
        total_edges=len(graph.links),
    )


# =========================================================================
# Loading
# =========================================================================

def load_graph_dict(data: Dict[str, Any]) -> Result[ArchitectureGraph]:
    """
    Parse a graph document.

    Expected format:
    {
        "version": "1.0",
        "metadata": {"name": "...", "domains": {...}},
        "components": [{"id": "...", "type": "API", "domain": "...", ...}, ...],
        "links": [{"source": "...", "target": "...", "type": "sync"}, ...],
        "externalLinks": [{"source": "...", "target": {"name": "..."}}, ...]
    }
    """
    try:
        graph = ArchitectureGraph.model_validate(data)
    except ValidationError as e:
        return Err(LoadFailure("Invalid graph document", detail=str(e)))

    logger.debug(
        "Loaded graph with %d components, %d links, %d external links",
        len(graph.components), len(graph.links), len(graph.external_links),
    )
    return Ok(graph)


def resolve_graph_path(graph_file: str) -> Path:
    """
    Resolve a directory argument to the standard graph file inside it.
    """
    path = Path(graph_file)
    if path.is_dir():
        for candidate in (path / DEFAULT_GRAPH_PATH, path / "graph.json"):
            if candidate.exists():
                return candidate
        return path / DEFAULT_GRAPH_PATH
    return path


def read_graph_document(path: Path) -> Result[Dict[str, Any]]:
    """Read a JSON graph document without validating its shape."""
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        return Err(LoadFailure("Failed to parse", path, str(e)))
    except OSError as e:
        return Err(LoadFailure("Failed to read", path, e.strerror))

    if not isinstance(data, dict):
        return Err(LoadFailure("Graph document must be a JSON object", path))
    return Ok(data)


def load_graph_file(graph_file: str) -> Result[ArchitectureGraph]:
    """Read and parse a graph file, or a directory holding .riviere/graph.json."""
    path = resolve_graph_path(graph_file)
    if not path.exists():
        return Err(LoadFailure("Graph file not found", Path(graph_file)))

    result = and_then(read_graph_document(path), load_graph_dict)
    if isinstance(result, Err):
        return Err(result.error.at(path))
    return result
