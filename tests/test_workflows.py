"""Integration workflow tests: multi-step scenarios spanning engine and services.

These exercise the hand-offs unit tests cannot catch: a snapshot file
loaded and built, a filtered projection laid out, join paths cross-checked
against the neighborhood of the same tables.
"""

from __future__ import annotations

from pathlib import Path

from schemagraph.domain.graph import GraphFilter, LayoutOptions
from schemagraph.engine import (
    apply_filter,
    apply_layout,
    build_graph,
    find_join_paths,
    find_related,
    layer_nodes,
    refresh_degrees,
)
from schemagraph.infrastructure.snapshot import load_snapshot
from schemagraph.services.graph import GraphService
from schemagraph.services.joins import JoinService


class TestSnapshotToLayout:
    """Load snapshot → build → filter → refresh → lay out."""

    def test_filtered_projection_layout(self, snapshot_file: Path) -> None:
        snapshot = load_snapshot(snapshot_file)
        graph = build_graph(snapshot.tables, snapshot.relationships, database_name="Shop")

        projection = apply_filter(graph, GraphFilter(exclude_schemas=frozenset({"hr"})))
        refresh_degrees(projection)
        orders = projection.get_node("sales.Orders")
        assert orders is not None
        assert orders.outgoing_edges == 1
        assert projection.statistics.total_tables == 6

        positioned = apply_layout(projection, LayoutOptions(algorithm="hierarchical"))
        assert [n.id for n in positioned.nodes] == [n.id for n in projection.nodes]
        assert layer_nodes(positioned)[-1] == ["sales.Customers", "sales.Categories"]

    def test_layout_keeps_service_graph_clean(self, snapshot_file: Path) -> None:
        svc = GraphService(load_snapshot(snapshot_file))
        before = svc.build().data["statistics"]
        for algorithm in ("hierarchical", "circular", "force", "grid"):
            assert svc.layout(algorithm=algorithm).ok
        assert svc.build().data["statistics"] == before


class TestJoinsAgainstNeighborhood:
    """A join path within N hops implies the target is in the N-hop neighborhood."""

    def test_paths_agree_with_related(self, snapshot_file: Path) -> None:
        snapshot = load_snapshot(snapshot_file)
        graph = build_graph(snapshot.tables, snapshot.relationships)
        source = "sales.Categories"
        for depth in range(1, 4):
            reachable = {n.id for n in find_related(graph, source, depth)}
            for node in graph.nodes:
                paths = find_join_paths(
                    source, node.id, snapshot.relationships, max_depth=depth
                )
                assert bool(paths) == (node.id in reachable), (depth, node.id)

    def test_suggest_after_paths(self, snapshot_file: Path) -> None:
        joins = JoinService(load_snapshot(snapshot_file))
        paths = joins.paths("sales.OrderItems", "sales.Customers")
        assert paths.ok
        first_hop = paths.data["paths"][0]["tables"][:2]
        suggestion = joins.suggest(*first_hop)
        assert suggestion.data["constraint_name"] == "FK_OrderItems_Orders"
        assert suggestion.data["conditions"][0]["left_column"] == "OrderId"
