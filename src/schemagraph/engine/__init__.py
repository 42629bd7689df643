"""Schema graph engine: pure, synchronous graph computations.

No I/O. Each function receives its own :class:`~schemagraph.domain.graph.Graph`
or metadata snapshot and returns a result the caller owns.
"""

from schemagraph.engine.builder import build_graph, compute_statistics, refresh_degrees
from schemagraph.engine.cycles import detect_cycles
from schemagraph.engine.filtering import apply_filter, available_schemas
from schemagraph.engine.joins import find_join_paths, suggest_join
from schemagraph.engine.layout import apply_layout, layer_nodes
from schemagraph.engine.neighborhood import find_related, related_depths

__all__ = [
    "apply_filter",
    "apply_layout",
    "available_schemas",
    "build_graph",
    "compute_statistics",
    "detect_cycles",
    "find_join_paths",
    "find_related",
    "layer_nodes",
    "refresh_degrees",
    "related_depths",
    "suggest_join",
]
