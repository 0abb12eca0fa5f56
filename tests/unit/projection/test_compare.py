"""Unit tests for graph comparison."""

import pytest

from eclair.core.graph import load_graph_dict
from eclair.core.types import FlowKind, NodeType
from eclair.projection.compare import ChangeType, compare_graphs, compute_domain_connection_diff


@pytest.fixture
def versions(shop_graph_data):
    """The shop graph and a next version of it."""
    before = load_graph_dict(shop_graph_data).unwrap()

    data = shop_graph_data
    data["components"] = [c for c in data["components"] if c["id"] != "billing:custom:ledger"]
    data["components"].append({
        "id": "billing:handler:on-placed", "type": "EventHandler", "name": "Invoice On Placed",
        "domain": "billing",
    })
    data["components"][3]["entity"] = "PurchaseOrder"
    data["links"][5]["type"] = "async"
    data["links"].append({"source": "orders:evt:placed", "target": "billing:handler:on-placed", "type": "async"})
    data["links"].pop(0)
    after = load_graph_dict(data).unwrap()
    return before, after


class TestCompareGraphs:
    def test_node_changes(self, versions):
        diff = compare_graphs(*versions)

        assert [n.id for n in diff.nodes.added] == ["billing:handler:on-placed"]
        assert [n.id for n in diff.nodes.removed] == ["billing:custom:ledger"]
        [modified] = diff.nodes.modified
        assert modified.after.id == "orders:op:create"
        assert modified.changed_fields == ["entity"]
        assert len(diff.nodes.unchanged) == 6

    def test_edge_changes(self, versions):
        diff = compare_graphs(*versions)

        assert [e.key for e in diff.edges.added] == ["orders:evt:placed->billing:handler:on-placed"]
        assert [e.key for e in diff.edges.removed] == ["ui:checkout->orders:api:place-order"]
        [modified] = diff.edges.modified
        assert modified.changed_fields == ["type"]
        assert (modified.before.type, modified.after.type) == (FlowKind.SYNC, FlowKind.ASYNC)

    def test_stats(self, versions):
        stats = compare_graphs(*versions).stats

        assert (stats.nodes_added, stats.nodes_removed, stats.nodes_modified, stats.nodes_unchanged) == (1, 1, 1, 6)
        assert (stats.edges_added, stats.edges_removed, stats.edges_modified, stats.edges_unchanged) == (1, 1, 1, 4)
        assert stats.has_changes

    def test_grouping(self, versions):
        diff = compare_graphs(*versions)

        billing = diff.by_domain["billing"]
        assert [n.id for n in billing.added] == ["billing:handler:on-placed"]
        assert [n.id for n in billing.removed] == ["billing:custom:ledger"]
        assert [m.after.id for m in diff.by_domain["orders"].modified] == ["orders:op:create"]
        assert set(diff.by_node_type) == {NodeType.EVENT_HANDLER, NodeType.CUSTOM, NodeType.DOMAIN_OP}

    def test_identical_graphs(self, shop_graph_data):
        graph = load_graph_dict(shop_graph_data).unwrap()

        diff = compare_graphs(graph, graph)

        assert not diff.stats.has_changes
        assert diff.by_domain == {}

    def test_modified_node_grouped_under_new_domain(self):
        before = load_graph_dict({"components": [{"id": "x", "type": "API", "name": "X", "domain": "a"}]}).unwrap()
        after = load_graph_dict({"components": [{"id": "x", "type": "API", "name": "X", "domain": "b"}]}).unwrap()

        diff = compare_graphs(before, after)

        assert diff.nodes.modified[0].changed_fields == ["domain"]
        assert list(diff.by_domain) == ["b"]


class TestDomainConnectionDiff:
    def test_connections(self, versions):
        result = compute_domain_connection_diff(*versions)

        assert result.domains == ["checkout", "orders", "shipping", "billing"]
        assert [c.key for c in result.added] == ["orders->billing"]
        assert [c.key for c in result.removed] == ["checkout->orders"]
        assert [c.key for c in result.unchanged] == ["orders->shipping"]

    def test_domains_include_both_versions(self):
        before = load_graph_dict({"components": [{"id": "x", "type": "API", "name": "X", "domain": "a"}]}).unwrap()
        after = load_graph_dict({"components": [{"id": "y", "type": "API", "name": "Y", "domain": "b"}]}).unwrap()

        assert compute_domain_connection_diff(before, after).domains == ["a", "b"]


def test_change_icons():
    assert ChangeType.ADDED.icon == "➕"
    assert ChangeType.UNCHANGED.icon == " "
