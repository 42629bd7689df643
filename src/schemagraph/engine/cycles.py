"""Circular foreign-key reference detection.

Follows outgoing edges only. A cycle is reported as the node ids along it
joined by ``" -> "``, repeating the closing node at the end::

    sales.a -> sales.b -> sales.c -> sales.a
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

import networkx as nx

from schemagraph.engine.index import to_digraph

if TYPE_CHECKING:
    from schemagraph.domain.graph import Graph

logger = logging.getLogger(__name__)

CYCLE_SEPARATOR = " -> "


def describe_cycle(node_ids: list[str]) -> str:
    return CYCLE_SEPARATOR.join(node_ids)


def detect_cycles(graph: Graph, *, exhaustive: bool = False) -> list[str]:
    """Return human-readable descriptions of circular references in *graph*.

    By default one cycle is reported per back-edge met during a single
    depth-first pass over the nodes in insertion order. Cycles that share
    all their back-edges with an already reported one are not repeated, so
    densely cyclic schemas may report fewer cycles than exist. Parallel
    foreign keys between the same two tables count as one edge.

    With *exhaustive* every elementary cycle is enumerated instead.
    """
    g = to_digraph(graph)
    if exhaustive:
        cycles = [describe_cycle([*cycle, cycle[0]]) for cycle in nx.simple_cycles(g)]
    else:
        cycles = list(_back_edge_cycles(g))
    logger.debug("Detected %d cycle(s) across %d tables", len(cycles), g.number_of_nodes())
    return cycles


def _back_edge_cycles(g: nx.DiGraph) -> Iterator[str]:
    visited: set[str] = set()
    for root in g:
        if root in visited:
            continue
        # Iterative DFS: path mirrors the recursion stack, iterators hold
        # each frame's remaining successors.
        visited.add(root)
        path = [root]
        on_path = {root}
        frames = [iter(g.successors(root))]
        while frames:
            child = next(frames[-1], None)
            if child is None:
                frames.pop()
                on_path.discard(path.pop())
                continue
            if child not in visited:
                visited.add(child)
                path.append(child)
                on_path.add(child)
                frames.append(iter(g.successors(child)))
            elif child in on_path:
                start = path.index(child)
                yield describe_cycle([*path[start:], child])
