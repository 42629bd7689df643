"""Graph Builder: table and foreign-key metadata to a classified :class:`Graph`."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from schemagraph.domain.graph import Edge, Graph, GraphStatistics, Node
from schemagraph.domain.metadata import RelationshipMetadata, TableMetadata
from schemagraph.domain.types import EdgeType, NodeColor, NodeType
from schemagraph.engine.cycles import detect_cycles
from schemagraph.engine.index import to_multidigraph

logger = logging.getLogger(__name__)

LOOKUP_MAX_ROWS = 100
PRIMARY_MIN_INCOMING = 4

_NODE_COLORS: dict[NodeType, NodeColor] = {
    NodeType.PRIMARY: NodeColor.BLUE,
    NodeType.LOOKUP: NodeColor.GREEN,
    NodeType.JUNCTION: NodeColor.PURPLE,
    NodeType.ORPHANED: NodeColor.GRAY,
}


def classify_node(incoming: int, outgoing: int, row_count: int) -> NodeType:
    """Classify a table by its degree and size. First matching rule wins."""
    if incoming == 0 and outgoing == 0:
        return NodeType.ORPHANED
    if outgoing >= 2 and incoming == 0:
        return NodeType.JUNCTION
    if incoming >= PRIMARY_MIN_INCOMING:
        return NodeType.PRIMARY
    if row_count < LOOKUP_MAX_ROWS and outgoing == 0:
        return NodeType.LOOKUP
    return NodeType.STANDARD


def color_for(node_type: NodeType) -> NodeColor:
    return _NODE_COLORS.get(node_type, NodeColor.BLUE)


def build_graph(
    tables: Iterable[TableMetadata],
    relationships: Iterable[RelationshipMetadata],
    *,
    database_name: str | None = None,
    exhaustive_cycles: bool = False,
) -> Graph:
    """Build a fully populated graph from metadata snapshots.

    Node ids are ``schema.table``; edge ids are constraint names. A later
    table or constraint with an id already seen replaces the earlier one in
    place. Relationships referencing a table that is not in *tables* are
    left out of the graph and logged.

    Args:
        tables: Table metadata, one node per table.
        relationships: Foreign keys, one edge per constraint.
        database_name: Source database, ``"Unknown"`` when not given.
        exhaustive_cycles: Count every elementary cycle in the statistics
            instead of one per back-edge.
    """
    nodes: dict[str, Node] = {}
    for table in tables:
        node = Node(
            id=table.full_name,
            label=table.name,
            schema_name=table.schema_name,
            table_name=table.name,
            row_count=table.row_count,
            primary_keys=[c.name for c in table.columns if c.is_primary_key],
            foreign_keys=[c.name for c in table.columns if c.is_foreign_key],
        )
        nodes[node.id] = node

    edges: dict[str, Edge] = {}
    for rel in relationships:
        if rel.source_id not in nodes or rel.target_id not in nodes:
            logger.warning(
                "Skipping relationship %s: %s -> %s references an unknown table",
                rel.constraint_name,
                rel.source_id,
                rel.target_id,
            )
            continue
        edges[rel.constraint_name] = Edge(
            id=rel.constraint_name,
            source_node_id=rel.source_id,
            target_node_id=rel.target_id,
            label=rel.source_column,
            source_column=rel.source_column,
            target_column=rel.target_column,
            type=EdgeType.ONE_TO_MANY,
            is_enabled=rel.enabled,
            delete_action=rel.delete_action,
            update_action=rel.update_action,
        )

    graph = Graph(
        nodes=list(nodes.values()),
        edges=list(edges.values()),
        database_name=database_name or "Unknown",
    )
    refresh_degrees(graph, exhaustive_cycles=exhaustive_cycles)
    logger.debug(
        "Built graph for %s: %d tables, %d relationships",
        graph.database_name,
        len(graph.nodes),
        len(graph.edges),
    )
    return graph


def refresh_degrees(graph: Graph, *, exhaustive_cycles: bool = False) -> Graph:
    """Recompute degrees, orphan flags, classification and statistics in place.

    Only edges whose endpoints are both nodes of *graph* are counted.
    Returns *graph* for chaining.
    """
    g = to_multidigraph(graph)
    for node in graph.nodes:
        node.incoming_edges = g.in_degree(node.id)
        node.outgoing_edges = g.out_degree(node.id)
        node.is_orphaned = node.incoming_edges == 0 and node.outgoing_edges == 0
        node.type = classify_node(node.incoming_edges, node.outgoing_edges, node.row_count)
        node.color = color_for(node.type)
    graph.statistics = compute_statistics(graph, exhaustive_cycles=exhaustive_cycles)
    return graph


def compute_statistics(graph: Graph, *, exhaustive_cycles: bool = False) -> GraphStatistics:
    """Derive statistics from the current contents of *graph*."""
    return GraphStatistics(
        total_tables=len(graph.nodes),
        total_relationships=len(graph.edges),
        orphaned_tables=sum(1 for n in graph.nodes if n.is_orphaned),
        disabled_constraints=sum(1 for e in graph.edges if not e.is_enabled),
        circular_references=len(detect_cycles(graph, exhaustive=exhaustive_cycles)),
    )
