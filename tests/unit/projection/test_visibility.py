"""Unit tests for visibility reduction and edge rewiring."""

import pytest

from eclair.core.types import Edge, FlowKind, Node, NodeType
from eclair.projection.visibility import find_visible_descendants, build_outgoing_edges, reduce_graph


def _node(node_id, node_type, domain="orders"):
    return Node(id=node_id, name=node_id, type=node_type, domain=domain)


def _edge(source, target, kind=None):
    return Edge(source=source, target=target, type=kind)


ALL_TYPES = set(NodeType)


class TestReduceGraph:
    def test_hidden_use_case_rewires_with_last_hop_kind(self):
        nodes = [
            _node("a", NodeType.API),
            _node("b", NodeType.USE_CASE),
            _node("c", NodeType.DOMAIN_OP),
        ]
        edges = [_edge("a", "b", FlowKind.SYNC), _edge("b", "c", FlowKind.ASYNC)]

        result = reduce_graph(nodes, edges, ALL_TYPES - {NodeType.USE_CASE})

        assert [n.id for n in result.nodes] == ["a", "c"]
        assert result.edges == [_edge("a", "c", FlowKind.ASYNC)]

    def test_all_types_visible_is_identity(self):
        nodes = [_node("a", NodeType.API), _node("b", NodeType.USE_CASE), _node("c", NodeType.EVENT)]
        edges = [_edge("a", "b"), _edge("b", "c", FlowKind.ASYNC), _edge("a", "b")]

        result = reduce_graph(nodes, edges, ALL_TYPES)

        assert result.nodes == nodes
        assert result.edges == edges

    def test_rewires_through_hidden_chain(self):
        nodes = [
            _node("a", NodeType.API),
            _node("h1", NodeType.USE_CASE),
            _node("h2", NodeType.DOMAIN_OP),
            _node("c", NodeType.EVENT),
        ]
        edges = [_edge("a", "h1"), _edge("h1", "h2"), _edge("h2", "c", FlowKind.ASYNC)]

        result = reduce_graph(nodes, edges, {NodeType.API, NodeType.EVENT})

        assert result.edges == [_edge("a", "c", FlowKind.ASYNC)]

    def test_hidden_cycle_terminates_and_finds_sink(self):
        nodes = [
            _node("a", NodeType.API),
            _node("h1", NodeType.USE_CASE),
            _node("h2", NodeType.USE_CASE),
            _node("c", NodeType.EVENT),
        ]
        edges = [_edge("a", "h1"), _edge("h1", "h2"), _edge("h2", "h1"), _edge("h2", "c")]

        result = reduce_graph(nodes, edges, {NodeType.API, NodeType.EVENT})

        assert result.edges == [_edge("a", "c")]

    def test_hidden_source_is_dropped_not_rewired_backwards(self):
        nodes = [
            _node("p", NodeType.API),
            _node("h", NodeType.USE_CASE),
            _node("c", NodeType.EVENT),
            _node("x", NodeType.USE_CASE),
        ]
        edges = [_edge("p", "h"), _edge("h", "c"), _edge("x", "c")]

        result = reduce_graph(nodes, edges, {NodeType.API, NodeType.EVENT})

        # p -> h is rewired forward; h -> c and x -> c have hidden sources
        assert result.edges == [_edge("p", "c")]

    def test_converging_chains_are_deduplicated_first_kind_wins(self):
        nodes = [
            _node("a", NodeType.API),
            _node("h1", NodeType.USE_CASE),
            _node("h2", NodeType.USE_CASE),
            _node("c", NodeType.EVENT),
        ]
        edges = [
            _edge("a", "h1"),
            _edge("a", "h2"),
            _edge("h1", "c", FlowKind.SYNC),
            _edge("h2", "c", FlowKind.ASYNC),
        ]

        result = reduce_graph(nodes, edges, {NodeType.API, NodeType.EVENT})

        assert result.edges == [_edge("a", "c", FlowKind.SYNC)]

    def test_fan_out_through_hidden_node(self):
        nodes = [
            _node("a", NodeType.API),
            _node("h", NodeType.USE_CASE),
            _node("c", NodeType.EVENT),
            _node("d", NodeType.DOMAIN_OP),
        ]
        edges = [_edge("a", "h"), _edge("h", "c"), _edge("h", "d")]

        result = reduce_graph(nodes, edges, {NodeType.API, NodeType.EVENT, NodeType.DOMAIN_OP})

        assert result.edges == [_edge("a", "c"), _edge("a", "d")]

    def test_hidden_dead_end_produces_no_edge(self):
        nodes = [_node("a", NodeType.API), _node("h", NodeType.USE_CASE)]
        edges = [_edge("a", "h")]

        result = reduce_graph(nodes, edges, {NodeType.API})

        assert [n.id for n in result.nodes] == ["a"]
        assert result.edges == []

    def test_self_and_parallel_edges_do_not_crash(self):
        nodes = [_node("a", NodeType.API), _node("h", NodeType.USE_CASE)]
        edges = [_edge("a", "a"), _edge("a", "h"), _edge("h", "a"), _edge("h", "h"), _edge("a", "h")]

        result = reduce_graph(nodes, edges, {NodeType.API})

        # a -> a kept as-is, and both a -> h edges rewire to a single a -> a
        assert result.edges == [_edge("a", "a"), _edge("a", "a")]

    def test_dangling_endpoints_are_tolerated(self):
        nodes = [_node("a", NodeType.API)]
        edges = [_edge("a", "ghost"), _edge("phantom", "a")]

        result = reduce_graph(nodes, edges, ALL_TYPES)

        assert result.edges == []

    def test_no_visible_types_hides_everything(self):
        nodes = [_node("a", NodeType.API), _node("b", NodeType.EVENT)]
        result = reduce_graph(nodes, [_edge("a", "b")], set())

        assert result.nodes == []
        assert result.edges == []

    def test_inputs_are_not_mutated(self):
        nodes = [_node("a", NodeType.API), _node("b", NodeType.USE_CASE), _node("c", NodeType.EVENT)]
        edges = [_edge("a", "b"), _edge("b", "c")]
        nodes_before, edges_before = list(nodes), list(edges)

        reduce_graph(nodes, edges, {NodeType.API, NodeType.EVENT})

        assert nodes == nodes_before
        assert edges == edges_before

    @pytest.mark.parametrize("hidden", [
        {NodeType.USE_CASE},
        {NodeType.DOMAIN_OP, NodeType.EVENT},
        {NodeType.API},
        {NodeType.EVENT_HANDLER, NodeType.USE_CASE, NodeType.UI},
    ])
    def test_every_edge_endpoint_is_visible(self, hidden):
        nodes = [
            _node("ui", NodeType.UI),
            _node("api", NodeType.API),
            _node("uc", NodeType.USE_CASE),
            _node("op", NodeType.DOMAIN_OP),
            _node("evt", NodeType.EVENT),
            _node("hdl", NodeType.EVENT_HANDLER),
            _node("op2", NodeType.DOMAIN_OP),
        ]
        edges = [
            _edge("ui", "api"), _edge("api", "uc"), _edge("uc", "op"),
            _edge("op", "evt", FlowKind.ASYNC), _edge("evt", "hdl", FlowKind.ASYNC),
            _edge("hdl", "op2"), _edge("op2", "uc"), _edge("uc", "uc"),
        ]

        result = reduce_graph(nodes, edges, ALL_TYPES - hidden)
        visible = result.node_ids()

        assert all(n.type not in hidden for n in result.nodes)
        for edge in result.edges:
            assert edge.source in visible
            assert edge.target in visible


class TestFindVisibleDescendants:
    def test_branches_keep_separate_paths(self):
        # Two routes from h reach c through the shared hidden node s
        edges = [
            _edge("h", "s1"), _edge("h", "s2"),
            _edge("s1", "s"), _edge("s2", "s"),
            _edge("s", "c", FlowKind.ASYNC),
        ]
        outgoing = build_outgoing_edges(edges)

        found = find_visible_descendants("h", {"c"}, outgoing)

        assert [target for target, _ in found] == ["c", "c"]
        assert all(hop.type == FlowKind.ASYNC for _, hop in found)

    def test_visible_start_yields_nothing(self):
        outgoing = build_outgoing_edges([_edge("c", "d")])
        assert find_visible_descendants("c", {"c", "d"}, outgoing) == []

    def test_discovery_order_is_depth_first_in_edge_order(self):
        # h -> x (hidden) -> c1, then h -> c2: c1 is found before c2
        edges = [_edge("h", "x"), _edge("h", "c2"), _edge("x", "c1"), _edge("x", "c3")]
        outgoing = build_outgoing_edges(edges)

        found = find_visible_descendants("h", {"c1", "c2", "c3"}, outgoing)

        assert [target for target, _ in found] == ["c1", "c3", "c2"]


class TestLongHiddenChains:
    def test_chain_longer_than_recursion_limit(self):
        hidden = [f"uc{i}" for i in range(1200)]
        nodes = (
            [_node("a", NodeType.API)]
            + [_node(h, NodeType.USE_CASE) for h in hidden]
            + [_node("z", NodeType.EVENT)]
        )
        chain = ["a"] + hidden + ["z"]
        edges = [_edge(s, t) for s, t in zip(chain, chain[1:])]
        edges[-1] = _edge(hidden[-1], "z", FlowKind.ASYNC)

        result = reduce_graph(nodes, edges, {NodeType.API, NodeType.EVENT})

        assert [n.id for n in result.nodes] == ["a", "z"]
        assert [(e.key, e.type) for e in result.edges] == [("a->z", FlowKind.ASYNC)]
