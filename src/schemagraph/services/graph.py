"""GraphService: schema graph construction, layout, filtering and analysis.

Wraps :mod:`schemagraph.engine` for the CLI. Every method returns a
ServiceResult with plain-dict data ready for JSON or Rich rendering.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from schemagraph.domain.graph import Edge, GraphFilter, Node
from schemagraph.domain.types import LayoutAlgorithm
from schemagraph.engine.builder import refresh_degrees
from schemagraph.engine.cycles import detect_cycles
from schemagraph.engine.filtering import apply_filter, available_schemas
from schemagraph.engine.layout import apply_layout, layer_nodes, resolve_algorithm
from schemagraph.engine.neighborhood import related_depths
from schemagraph.services.base import BaseService
from schemagraph.services.result import ServiceResult
from schemagraph.services.telemetry import trace_span, traced


def _node_item(node: Node) -> dict[str, Any]:
    return {
        "id": node.id,
        "schema": node.schema_name,
        "table": node.table_name,
        "rows": node.row_count,
        "type": str(node.type),
        "color": str(node.color),
        "incoming": node.incoming_edges,
        "outgoing": node.outgoing_edges,
        "orphaned": node.is_orphaned,
    }


def _edge_item(edge: Edge) -> dict[str, Any]:
    return {
        "id": edge.id,
        "source_id": edge.source_node_id,
        "target_id": edge.target_node_id,
        "source_column": edge.source_column,
        "target_column": edge.target_column,
        "enabled": edge.is_enabled,
        "delete_action": edge.delete_action,
        "update_action": edge.update_action,
    }


class GraphService(BaseService):
    """Handles graph building, layout, filtering and analysis."""

    # ------------------------------------------------------------------
    # build: statistics summary
    # ------------------------------------------------------------------

    @traced
    def build(self) -> ServiceResult:
        """Build the graph and summarize it."""
        with trace_span("build_graph") as span:
            graph = self.graph
            if span:
                span.annotate("nodes", len(graph.nodes))
                span.annotate("edges", len(graph.edges))

        skipped = len(self._snapshot.relationships) - len(graph.edges)
        warnings: list[str] = []
        if skipped > 0:
            warnings.append(
                f"{skipped} relationship(s) not in graph (unknown table or duplicate name)"
            )

        by_type = Counter(str(n.type) for n in graph.nodes)
        return ServiceResult(
            ok=True,
            op="build",
            data={
                "database": graph.database_name,
                "generated": graph.generated.isoformat(),
                "statistics": graph.statistics.model_dump(),
                "node_types": dict(sorted(by_type.items())),
                "schemas": available_schemas(graph),
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # layout: node positions
    # ------------------------------------------------------------------

    @traced
    def layout(
        self,
        *,
        algorithm: LayoutAlgorithm | str | None = None,
        node_spacing: float | None = None,
        layer_spacing: float | None = None,
        seed: int | None = None,
    ) -> ServiceResult:
        """Position every node; arguments left as None use the ``[layout]`` config."""
        options = self._settings.layout.to_options(
            algorithm=algorithm,
            node_spacing=node_spacing,
            layer_spacing=layer_spacing,
            seed=seed,
        )
        resolved = resolve_algorithm(options.algorithm)
        warnings: list[str] = []
        if str(options.algorithm).lower() != resolved:
            warnings.append(f"Layout '{options.algorithm}' is not implemented; using {resolved}")

        with trace_span("apply_layout") as span:
            positioned = apply_layout(self.graph, options)
            if span:
                span.annotate("algorithm", str(resolved))

        items = [
            {
                "id": n.id,
                "type": str(n.type),
                "color": str(n.color),
                "x": round(n.x, 2),
                "y": round(n.y, 2),
                "width": n.width,
                "height": n.height,
            }
            for n in positioned.nodes
        ]
        data: dict[str, Any] = {"algorithm": str(resolved), "count": len(items), "items": items}
        if resolved == LayoutAlgorithm.HIERARCHICAL:
            data["layers"] = layer_nodes(positioned)
        return ServiceResult(ok=True, op="layout", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # filter: structural projection
    # ------------------------------------------------------------------

    @traced
    def filter(self, graph_filter: GraphFilter) -> ServiceResult:
        """Project the graph onto the tables matching *graph_filter*.

        Node attributes come from the full graph. The reported statistics
        are re-derived for the projection alone.
        """
        projection = apply_filter(self.graph, graph_filter)
        reanalyzed = refresh_degrees(
            projection.model_copy(deep=True),
            exhaustive_cycles=self._settings.cycles.exhaustive,
        )
        return ServiceResult(
            ok=True,
            op="filter",
            data={
                "count": len(projection.nodes),
                "items": [_node_item(n) for n in projection.nodes],
                "edges": [_edge_item(e) for e in projection.edges],
                "statistics": reanalyzed.statistics.model_dump(),
            },
        )

    # ------------------------------------------------------------------
    # related: multi-hop neighborhood
    # ------------------------------------------------------------------

    @traced
    def related(self, node_id: str, *, depth: int | None = None) -> ServiceResult:
        """Find tables within *depth* hops of *node_id*, in either direction."""
        graph = self.graph
        if graph.get_node(node_id) is None:
            return ServiceResult.failure(
                "related", "NOT_FOUND", f"Table '{node_id}' not found in graph"
            )

        depth = self._settings.neighborhood.depth if depth is None else max(depth, 0)
        depths = related_depths(graph, node_id, depth)
        items = [
            {**_node_item(n), "depth": depths[n.id]}
            for n in graph.nodes
            if n.id in depths
        ]
        items.sort(key=lambda item: item["depth"])
        return ServiceResult(
            ok=True,
            op="related",
            data={"source_id": node_id, "depth": depth, "count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # cycles: circular references
    # ------------------------------------------------------------------

    @traced
    def cycles(self, *, exhaustive: bool | None = None) -> ServiceResult:
        """Report circular foreign-key chains."""
        if exhaustive is None:
            exhaustive = self._settings.cycles.exhaustive
        found = detect_cycles(self.graph, exhaustive=exhaustive)
        return ServiceResult(
            ok=True,
            op="cycles",
            data={"exhaustive": exhaustive, "count": len(found), "cycles": found},
        )

    # ------------------------------------------------------------------
    # schemas: distinct schema names
    # ------------------------------------------------------------------

    @traced
    def schemas(self) -> ServiceResult:
        """List schemas with their table counts."""
        graph = self.graph
        tables = Counter(n.schema_name for n in graph.nodes)
        items = [{"schema": s, "tables": tables[s]} for s in available_schemas(graph)]
        return ServiceResult(ok=True, op="schemas", data={"count": len(items), "items": items})

