"""Layout Engine: assign ``(x, y)`` to every node under a selectable algorithm.

:func:`apply_layout` positions a deep copy and leaves its input untouched,
so callers holding the previous graph (UI history, concurrent views) never
see coordinates change underneath them. Node and edge identity and counts
are never altered.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable

from schemagraph.domain.graph import DEFAULT_NODE_WIDTH, Graph, LayoutOptions, Node
from schemagraph.domain.types import LayoutAlgorithm
from schemagraph.engine.index import to_digraph

logger = logging.getLogger(__name__)

LAYER_TOP = 50.0

CIRCLE_MIN_RADIUS = 200.0
CIRCLE_RADIUS_PER_NODE = 30.0

FORCE_REPULSION = 50000.0
FORCE_ATTRACTION = 0.01
FORCE_DAMPING = 0.9
FORCE_EPSILON = 0.01
FORCE_INITIAL_MIN = 100
FORCE_INITIAL_MAX = 700

GRID_ORIGIN = 50.0
GRID_CELL_WIDTH = 150.0
GRID_CELL_HEIGHT = 100.0


def resolve_algorithm(value: LayoutAlgorithm | str) -> LayoutAlgorithm:
    """Map a selector to an implemented algorithm, defaulting to hierarchical."""
    try:
        algorithm = LayoutAlgorithm(str(value).lower())
    except ValueError:
        return LayoutAlgorithm.HIERARCHICAL
    return algorithm if algorithm in _LAYOUTS else LayoutAlgorithm.HIERARCHICAL


def apply_layout(graph: Graph, options: LayoutOptions | None = None) -> Graph:
    """Return a copy of *graph* with every node positioned.

    An empty graph comes back unchanged.
    """
    options = options or LayoutOptions()
    positioned = graph.model_copy(deep=True)
    if not positioned.nodes:
        return positioned

    algorithm = resolve_algorithm(options.algorithm)
    if algorithm != options.algorithm:
        logger.debug("Layout %r not available, using %s", options.algorithm, algorithm)
    _LAYOUTS[algorithm](positioned, options)
    logger.debug("Applied %s layout to %d nodes", algorithm, len(positioned.nodes))
    return positioned


# ── Hierarchical ─────────────────────────────────────────────────────


def layer_nodes(graph: Graph) -> list[list[str]]:
    """Group node ids into BFS layers from the root tables.

    Roots are nodes with no incoming edge (or the first node when every node
    has one). Each following layer holds the not-yet-placed targets of the
    previous layer's outgoing edges. Nodes never reached (cycles without a
    root, disconnected components) form one final overflow layer. Every node
    appears in exactly one layer.
    """
    g = to_digraph(graph)
    order = list(g)
    if not order:
        return []

    roots = [n for n in order if g.in_degree(n) == 0] or order[:1]

    layers: list[list[str]] = []
    placed: set[str] = set()
    current = roots
    while current:
        layers.append(current)
        placed.update(current)
        following: dict[str, None] = {}
        for node_id in current:
            for child in g.successors(node_id):
                if child not in placed:
                    following[child] = None
        current = list(following)

    overflow = [n for n in order if n not in placed]
    if overflow:
        layers.append(overflow)
    return layers


def _hierarchical(graph: Graph, options: LayoutOptions) -> None:
    by_id = _index(graph.nodes)
    step = options.node_spacing + DEFAULT_NODE_WIDTH
    y = LAYER_TOP
    for layer in layer_nodes(graph):
        x = options.center_x - len(layer) * step / 2
        for node_id in layer:
            node = by_id[node_id]
            node.x = x
            node.y = y
            x += step
        y += options.layer_spacing


# ── Circular ─────────────────────────────────────────────────────────


def _circular(graph: Graph, options: LayoutOptions) -> None:
    count = len(graph.nodes)
    radius = max(CIRCLE_MIN_RADIUS, count * CIRCLE_RADIUS_PER_NODE)
    angle_step = 2 * math.pi / count
    for i, node in enumerate(graph.nodes):
        angle = i * angle_step
        node.x = options.center_x + radius * math.cos(angle)
        node.y = options.center_y + radius * math.sin(angle)


# ── Force-directed ───────────────────────────────────────────────────


def _force_directed(graph: Graph, options: LayoutOptions) -> None:
    """Spring-electrical simulation from seeded random starting positions.

    Nodes are moved one at a time within an iteration, so later nodes feel
    the already-updated positions of earlier ones. Same seed and node order
    always give the same coordinates.
    """
    rng = random.Random(options.seed)
    for node in graph.nodes:
        node.x = float(rng.randrange(FORCE_INITIAL_MIN, FORCE_INITIAL_MAX))
        node.y = float(rng.randrange(FORCE_INITIAL_MIN, FORCE_INITIAL_MAX))

    by_id = _index(graph.nodes)
    # One entry per incident edge; parallel foreign keys pull proportionally harder.
    springs: dict[str, list[Node]] = {node_id: [] for node_id in by_id}
    for edge in graph.edges:
        source = by_id.get(edge.source_node_id)
        target = by_id.get(edge.target_node_id)
        if source is None or target is None:
            continue
        springs[source.id].append(target)
        springs[target.id].append(source)

    for _ in range(options.iterations):
        for node in graph.nodes:
            fx = fy = 0.0
            for other in graph.nodes:
                if other.id == node.id:
                    continue
                dx = node.x - other.x
                dy = node.y - other.y
                distance = math.hypot(dx, dy) + FORCE_EPSILON
                force = FORCE_REPULSION / (distance * distance)
                fx += dx / distance * force
                fy += dy / distance * force

            for other in springs[node.id]:
                fx += (other.x - node.x) * FORCE_ATTRACTION
                fy += (other.y - node.y) * FORCE_ATTRACTION

            node.x += fx * FORCE_DAMPING
            node.y += fy * FORCE_DAMPING


# ── Grid ─────────────────────────────────────────────────────────────


def _grid(graph: Graph, options: LayoutOptions) -> None:
    columns = math.ceil(math.sqrt(len(graph.nodes)))
    for i, node in enumerate(graph.nodes):
        row, col = divmod(i, columns)
        node.x = GRID_ORIGIN + col * GRID_CELL_WIDTH
        node.y = GRID_ORIGIN + row * GRID_CELL_HEIGHT


def _index(nodes: list[Node]) -> dict[str, Node]:
    return {node.id: node for node in nodes}


_LAYOUTS: dict[LayoutAlgorithm, Callable[[Graph, LayoutOptions], None]] = {
    LayoutAlgorithm.HIERARCHICAL: _hierarchical,
    LayoutAlgorithm.CIRCULAR: _circular,
    LayoutAlgorithm.FORCE: _force_directed,
    LayoutAlgorithm.GRID: _grid,
}
