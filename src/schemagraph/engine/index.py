"""NetworkX views over a schema :class:`Graph`.

Rebuilt per call, never cached on the Graph. All nodes are added first so
isolated tables are visible to algorithms; an edge is added only when both
of its endpoints are nodes of the graph, so relationships pointing at a
missing table never show up in degrees, traversals or cycles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from schemagraph.domain.graph import Graph


def to_multidigraph(graph: Graph) -> nx.MultiDiGraph:
    """One directed edge per foreign key, keyed by constraint name."""
    g = nx.MultiDiGraph()
    g.add_nodes_from(node.id for node in graph.nodes)
    for edge in graph.edges:
        if edge.source_node_id in g and edge.target_node_id in g:
            g.add_edge(edge.source_node_id, edge.target_node_id, key=edge.id)
    return g


def to_digraph(graph: Graph) -> nx.DiGraph:
    """Collapse parallel foreign keys into one directed edge per table pair.

    Successor order follows the first edge to each target in ``graph.edges``.
    """
    g = nx.DiGraph()
    g.add_nodes_from(node.id for node in graph.nodes)
    for edge in graph.edges:
        if edge.source_node_id in g and edge.target_node_id in g:
            g.add_edge(edge.source_node_id, edge.target_node_id)
    return g

