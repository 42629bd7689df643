"""Neighborhood Finder: tables within N foreign-key hops of a table.

Edges are followed in both directions. Breadth-first, level by level; a
table already found is never expanded again, so cycles cannot loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

from schemagraph.engine.index import to_multidigraph

if TYPE_CHECKING:
    from schemagraph.domain.graph import Graph, Node


def related_depths(graph: Graph, node_id: str, depth: int = 1) -> dict[str, int]:
    """Map each table within *depth* hops of *node_id* to its hop distance.

    The start table maps to 0. Returns an empty dict when *node_id* is not
    in the graph.
    """
    g = to_multidigraph(graph)
    if node_id not in g:
        return {}

    depths = {node_id: 0}
    frontier = [node_id]
    for hop in range(1, depth + 1):
        following: list[str] = []
        for current in frontier:
            for neighbor in nx.all_neighbors(g, current):
                if neighbor not in depths:
                    depths[neighbor] = hop
                    following.append(neighbor)
        if not following:
            break
        frontier = following
    return depths


def find_related(graph: Graph, node_id: str, depth: int = 1) -> list[Node]:
    """Return the start node and every node within *depth* hops, in graph order.

    ``depth=0`` (or less) returns just the start node.
    """
    depths = related_depths(graph, node_id, depth)
    return [n for n in graph.nodes if n.id in depths]
