"""Filter Engine: structural projections of a graph."""

from __future__ import annotations

import logging

from schemagraph.domain.graph import Graph, GraphFilter, Node

logger = logging.getLogger(__name__)


def matches(node: Node, graph_filter: GraphFilter) -> bool:
    """Return True when *node* satisfies every criterion that is set."""
    if graph_filter.include_schemas and node.schema_name not in graph_filter.include_schemas:
        return False
    if graph_filter.exclude_schemas and node.schema_name in graph_filter.exclude_schemas:
        return False
    if graph_filter.include_tables and node.id not in graph_filter.include_tables:
        return False
    if graph_filter.orphaned_only and not node.is_orphaned:
        return False
    return graph_filter.min_row_count <= node.row_count <= graph_filter.max_row_count


def apply_filter(graph: Graph, graph_filter: GraphFilter) -> Graph:
    """Return a new graph with only matching nodes and the edges between them.

    Node attributes (degrees, orphan flag, classification) are carried over
    from *graph* unchanged and statistics are left empty: this is a
    projection, not a re-analysis. Use
    :func:`schemagraph.engine.builder.refresh_degrees` on the result to
    re-derive them.
    """
    nodes = [n.model_copy(deep=True) for n in graph.nodes if matches(n, graph_filter)]
    kept = {n.id for n in nodes}
    edges = [
        e.model_copy()
        for e in graph.edges
        if e.source_node_id in kept and e.target_node_id in kept
    ]
    logger.debug(
        "Filter kept %d/%d tables and %d/%d relationships",
        len(nodes),
        len(graph.nodes),
        len(edges),
        len(graph.edges),
    )
    return Graph(
        nodes=nodes,
        edges=edges,
        generated=graph.generated,
        database_name=graph.database_name,
    )


def available_schemas(graph: Graph) -> list[str]:
    """Distinct schema names present in *graph*, sorted."""
    return sorted({n.schema_name for n in graph.nodes})
