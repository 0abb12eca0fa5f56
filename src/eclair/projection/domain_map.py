"""
Domain map - the component graph aggregated one level up.

Every link between components of different domains becomes part of one
connection per ordered domain pair, counted by what it calls: links
into an API count as API calls, links into an EventHandler as events.
External links are aggregated per source domain and external system.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..core.graph import ArchitectureGraph, external_node_id
from ..core.types import Edge, FlowKind, Node, NodeType, edge_key

logger = logging.getLogger(__name__)


class ConnectionKind(StrEnum):
    SYNC = "sync"
    ASYNC = "async"
    UNKNOWN = "unknown"

    @classmethod
    def of(cls, flow: Optional[FlowKind]) -> "ConnectionKind":
        return cls.UNKNOWN if flow is None else cls(flow.value)


@dataclass(frozen=True)
class ConnectionDetail:
    """One component-level link behind a domain connection."""
    source_name: str
    target_name: str
    kind: ConnectionKind
    target_node_type: str


@dataclass
class DomainConnection:
    source: str
    target: str
    api_count: int = 0
    event_count: int = 0
    connections: List[ConnectionDetail] = field(default_factory=list)

    @property
    def key(self) -> str:
        return edge_key(self.source, self.target)

    @property
    def label(self) -> Optional[str]:
        return format_connection_label(self.api_count, self.event_count)


@dataclass
class ExternalConnection:
    source_domain: str
    target_name: str
    connections: List[ConnectionDetail] = field(default_factory=list)

    @property
    def connection_count(self) -> int:
        return len(self.connections)

    @property
    def target_id(self) -> str:
        return external_node_id(self.target_name)


@dataclass
class DomainMap:
    domains: List[Tuple[str, int]] = field(default_factory=list)
    external_systems: List[Tuple[str, int]] = field(default_factory=list)
    connections: List[DomainConnection] = field(default_factory=list)
    external_connections: List[ExternalConnection] = field(default_factory=list)


def format_connection_label(api_count: int, event_count: int) -> Optional[str]:
    """Edge label for a domain connection, e.g. '2 API · 1 Event'."""
    parts = []
    if api_count > 0:
        parts.append(f"{api_count} API")
    if event_count > 0:
        parts.append(f"{event_count} Event")
    return " · ".join(parts) or None


def aggregate_domain_connections(
    components: Iterable[Node],
    links: Iterable[Edge],
) -> Dict[str, DomainConnection]:
    """
    Group cross-domain links by (source domain, target domain).

    Links with an unknown endpoint, or inside one domain, are skipped.
    The result is keyed 'source->target' in first-seen order.
    """
    by_id = {node.id: node for node in components}
    aggregation: Dict[str, DomainConnection] = {}

    for link in links:
        source = by_id.get(link.source)
        target = by_id.get(link.target)
        if source is None or target is None:
            continue
        if source.domain == target.domain:
            continue

        key = edge_key(source.domain, target.domain)
        connection = aggregation.get(key)
        if connection is None:
            connection = aggregation[key] = DomainConnection(source.domain, target.domain)

        if target.type is NodeType.API:
            connection.api_count += 1
        if target.type is NodeType.EVENT_HANDLER:
            connection.event_count += 1
        connection.connections.append(ConnectionDetail(
            source_name=source.name,
            target_name=target.name,
            kind=ConnectionKind.of(link.type),
            target_node_type=target.type.value,
        ))

    return aggregation


def extract_domain_map(graph: ArchitectureGraph) -> DomainMap:
    """Build the domain-level view of a graph document."""
    by_id = {node.id: node for node in graph.components}

    domain_counts = Counter(node.domain for node in graph.components)
    external_counts = Counter(link.target.name for link in graph.external_links)

    externals: Dict[str, ExternalConnection] = {}
    for link in graph.external_links:
        source = by_id.get(link.source)
        if source is None:
            continue
        key = edge_key(source.domain, link.target.name)
        connection = externals.get(key)
        if connection is None:
            connection = externals[key] = ExternalConnection(source.domain, link.target.name)
        connection.connections.append(ConnectionDetail(
            source_name=source.name,
            target_name=link.target.name,
            kind=ConnectionKind.of(link.type),
            target_node_type=NodeType.EXTERNAL.value,
        ))

    domain_map = DomainMap(
        domains=list(domain_counts.items()),
        external_systems=list(external_counts.items()),
        connections=list(aggregate_domain_connections(graph.components, graph.links).values()),
        external_connections=list(externals.values()),
    )
    logger.debug(
        "Domain map: %d domains, %d connections, %d external connections",
        len(domain_map.domains), len(domain_map.connections), len(domain_map.external_connections),
    )
    return domain_map


def connected_domains(domain: str, domain_map: DomainMap) -> Set[str]:
    """Domains, and external node ids, linked to domain in either direction."""
    connected: Set[str] = set()
    for connection in domain_map.connections:
        if connection.source == domain:
            connected.add(connection.target)
        if connection.target == domain:
            connected.add(connection.source)
    for external in domain_map.external_connections:
        if external.source_domain == domain:
            connected.add(external.target_id)
    return connected
