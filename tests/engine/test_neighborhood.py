"""Tests for the neighborhood finder."""

from __future__ import annotations

import pytest

from schemagraph.domain.graph import Graph
from schemagraph.engine.neighborhood import find_related, related_depths
from tests.conftest import chain_graph


def _ids(graph: Graph, node_id: str, depth: int) -> list[str]:
    return [n.id for n in find_related(graph, node_id, depth)]


class TestFindRelated:
    def test_direct_neighbors_both_directions(self, shop_graph: Graph) -> None:
        assert _ids(shop_graph, "sales.Orders", 1) == [
            "sales.Customers",
            "sales.Orders",
            "sales.OrderItems",
            "hr.Employees",
        ]

    def test_depth_two(self, shop_graph: Graph) -> None:
        assert set(_ids(shop_graph, "sales.Orders", 2)) == {
            "sales.Customers",
            "sales.Orders",
            "sales.OrderItems",
            "sales.Products",
            "hr.Employees",
        }

    def test_depth_three_reaches_categories(self, shop_graph: Graph) -> None:
        ids = _ids(shop_graph, "sales.Orders", 3)
        assert len(ids) == 6
        assert "sales.Categories" in ids
        assert "audit.Log" not in ids

    @pytest.mark.parametrize("depth", [0, -1])
    def test_depth_zero_is_start_only(self, shop_graph: Graph, depth: int) -> None:
        assert _ids(shop_graph, "sales.Orders", depth) == ["sales.Orders"]

    def test_orphan_returns_itself(self, shop_graph: Graph) -> None:
        assert _ids(shop_graph, "audit.Log", 5) == ["audit.Log"]

    def test_unknown_node_returns_empty(self, shop_graph: Graph) -> None:
        assert find_related(shop_graph, "sales.Missing", 2) == []

    def test_monotonic_in_depth(self, shop_graph: Graph) -> None:
        previous: set[str] = set()
        for depth in range(5):
            current = set(_ids(shop_graph, "sales.Customers", depth))
            assert previous <= current
            previous = current

    def test_cycle_terminates(self) -> None:
        graph = chain_graph("dbo.A", "dbo.B", "dbo.C")
        back = graph.edges[0].model_copy(
            update={"id": "FK_back", "source_node_id": "dbo.C", "target_node_id": "dbo.A"}
        )
        graph.edges.append(back)
        assert set(_ids(graph, "dbo.A", 10)) == {"dbo.A", "dbo.B", "dbo.C"}


class TestRelatedDepths:
    def test_hop_distances(self, shop_graph: Graph) -> None:
        assert related_depths(shop_graph, "sales.Customers", 3) == {
            "sales.Customers": 0,
            "sales.Orders": 1,
            "hr.Employees": 2,
            "sales.OrderItems": 2,
            "sales.Products": 3,
        }

    def test_chain_distance(self) -> None:
        graph = chain_graph("dbo.A", "dbo.B", "dbo.C", "dbo.D")
        assert related_depths(graph, "dbo.D", 2) == {"dbo.D": 0, "dbo.C": 1, "dbo.B": 2}

    def test_unknown_node(self, shop_graph: Graph) -> None:
        assert related_depths(shop_graph, "nope.Nope") == {}
