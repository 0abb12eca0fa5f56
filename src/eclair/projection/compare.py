"""
Graph comparison - what changed between two versions of a graph document.

Identifies:
1. Added/Removed/Modified components, matched by id
2. Added/Removed/Modified links, matched by 'source->target'
3. Domain connections that appeared or disappeared
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Dict, List

from ..core.graph import ArchitectureGraph
from ..core.types import Edge, Node, NodeType
from .domain_map import DomainConnection, aggregate_domain_connections

# Compared in this order; changed fields are reported in the same order
NODE_FIELDS = ("type", "name", "domain", "module", "description", "entity")
EDGE_FIELDS = ("type",)


class ChangeType(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"

    @property
    def icon(self) -> str:
        return {
            ChangeType.ADDED: "➕",
            ChangeType.REMOVED: "🗑️",
            ChangeType.MODIFIED: "✏️",
        }.get(self, " ")


@dataclass(frozen=True)
class NodeModification:
    before: Node
    after: Node
    changed_fields: List[str]


@dataclass(frozen=True)
class EdgeModification:
    before: Edge
    after: Edge
    changed_fields: List[str]


@dataclass
class NodeDiff:
    added: List[Node] = field(default_factory=list)
    removed: List[Node] = field(default_factory=list)
    modified: List[NodeModification] = field(default_factory=list)
    unchanged: List[Node] = field(default_factory=list)


@dataclass
class EdgeDiff:
    added: List[Edge] = field(default_factory=list)
    removed: List[Edge] = field(default_factory=list)
    modified: List[EdgeModification] = field(default_factory=list)
    unchanged: List[Edge] = field(default_factory=list)


@dataclass
class NodeChanges:
    """Added, removed and modified nodes of one domain or category."""
    added: List[Node] = field(default_factory=list)
    removed: List[Node] = field(default_factory=list)
    modified: List[NodeModification] = field(default_factory=list)


@dataclass(frozen=True)
class DiffStats:
    nodes_added: int
    nodes_removed: int
    nodes_modified: int
    nodes_unchanged: int
    edges_added: int
    edges_removed: int
    edges_modified: int
    edges_unchanged: int

    @property
    def has_changes(self) -> bool:
        return any((
            self.nodes_added, self.nodes_removed, self.nodes_modified,
            self.edges_added, self.edges_removed, self.edges_modified,
        ))


@dataclass
class GraphDiff:
    nodes: NodeDiff
    edges: EdgeDiff
    stats: DiffStats
    by_domain: Dict[str, NodeChanges] = field(default_factory=dict)
    by_node_type: Dict[NodeType, NodeChanges] = field(default_factory=dict)


@dataclass
class DomainConnectionDiff:
    domains: List[str] = field(default_factory=list)
    added: List[DomainConnection] = field(default_factory=list)
    removed: List[DomainConnection] = field(default_factory=list)
    unchanged: List[DomainConnection] = field(default_factory=list)


def changed_fields(before, after, fields) -> List[str]:
    return [name for name in fields if getattr(before, name) != getattr(after, name)]


def compare_nodes(before: List[Node], after: List[Node]) -> NodeDiff:
    before_by_id = {node.id: node for node in before}
    after_ids = {node.id for node in after}
    diff = NodeDiff()

    for node in after:
        old = before_by_id.get(node.id)
        if old is None:
            diff.added.append(node)
            continue
        fields = changed_fields(old, node, NODE_FIELDS)
        if fields:
            diff.modified.append(NodeModification(old, node, fields))
        else:
            diff.unchanged.append(node)

    diff.removed = [node for node in before if node.id not in after_ids]
    return diff


def compare_edges(before: List[Edge], after: List[Edge]) -> EdgeDiff:
    before_by_key = {edge.key: edge for edge in before}
    after_keys = {edge.key for edge in after}
    diff = EdgeDiff()

    for edge in after:
        old = before_by_key.get(edge.key)
        if old is None:
            diff.added.append(edge)
            continue
        fields = changed_fields(old, edge, EDGE_FIELDS)
        if fields:
            diff.modified.append(EdgeModification(old, edge, fields))
        else:
            diff.unchanged.append(edge)

    diff.removed = [edge for edge in before if edge.key not in after_keys]
    return diff


def _group_changes(nodes: NodeDiff, key) -> Dict:
    groups: Dict = {}
    for node in nodes.added:
        groups.setdefault(key(node), NodeChanges()).added.append(node)
    for change in nodes.modified:
        groups.setdefault(key(change.after), NodeChanges()).modified.append(change)
    for node in nodes.removed:
        groups.setdefault(key(node), NodeChanges()).removed.append(node)
    return groups


def compare_graphs(before: ArchitectureGraph, after: ArchitectureGraph) -> GraphDiff:
    """
    Compare the old (before) and new (after) graph documents.

    Modified nodes are grouped under their new domain and category.
    """
    nodes = compare_nodes(before.components, after.components)
    edges = compare_edges(before.links, after.links)
    stats = DiffStats(
        nodes_added=len(nodes.added),
        nodes_removed=len(nodes.removed),
        nodes_modified=len(nodes.modified),
        nodes_unchanged=len(nodes.unchanged),
        edges_added=len(edges.added),
        edges_removed=len(edges.removed),
        edges_modified=len(edges.modified),
        edges_unchanged=len(edges.unchanged),
    )
    return GraphDiff(
        nodes=nodes,
        edges=edges,
        stats=stats,
        by_domain=_group_changes(nodes, lambda node: node.domain),
        by_node_type=_group_changes(nodes, lambda node: node.type),
    )


def compute_domain_connection_diff(
    before: ArchitectureGraph,
    after: ArchitectureGraph,
) -> DomainConnectionDiff:
    """Domain connections that appeared, disappeared or stayed between versions."""
    domains = dict.fromkeys(node.domain for node in before.components)
    domains.update(dict.fromkeys(node.domain for node in after.components))

    old = aggregate_domain_connections(before.components, before.links)
    new = aggregate_domain_connections(after.components, after.links)

    return DomainConnectionDiff(
        domains=list(domains),
        added=[connection for key, connection in new.items() if key not in old],
        removed=[connection for key, connection in old.items() if key not in new],
        unchanged=[connection for key, connection in new.items() if key in old],
    )
