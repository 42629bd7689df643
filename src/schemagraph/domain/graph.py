"""Graph model: nodes (tables), edges (foreign keys) and derived statistics.

Passive data. Every behaviour lives in :mod:`schemagraph.engine`, which
receives a :class:`Graph` and returns a new or updated one.
"""

from __future__ import annotations

import sys
from datetime import datetime

from pydantic import BaseModel, Field

from schemagraph.domain.types import EdgeType, LayoutAlgorithm, NodeColor, NodeType

DEFAULT_NODE_WIDTH = 120.0
DEFAULT_NODE_HEIGHT = 60.0


class Node(BaseModel):
    """A table in the schema graph. ``id`` is ``schema.table``."""

    id: str
    label: str
    schema_name: str
    table_name: str
    row_count: int = 0
    type: NodeType = NodeType.STANDARD
    color: NodeColor = NodeColor.BLUE
    x: float = 0.0
    y: float = 0.0
    width: float = DEFAULT_NODE_WIDTH
    height: float = DEFAULT_NODE_HEIGHT
    is_selected: bool = False
    is_highlighted: bool = False
    is_orphaned: bool = False
    incoming_edges: int = 0
    outgoing_edges: int = 0
    primary_keys: list[str] = Field(default_factory=list)
    foreign_keys: list[str] = Field(default_factory=list)


class Edge(BaseModel):
    """A foreign-key relationship. ``id`` is the constraint name."""

    id: str
    source_node_id: str
    target_node_id: str
    label: str = ""
    source_column: str = ""
    target_column: str = ""
    type: EdgeType = EdgeType.ONE_TO_MANY
    is_enabled: bool = True
    is_highlighted: bool = False
    delete_action: str = "NO ACTION"
    update_action: str = "NO ACTION"
    thickness: float = 2.0


class GraphStatistics(BaseModel):
    """Counts derived from a graph's current contents."""

    total_tables: int = 0
    total_relationships: int = 0
    orphaned_tables: int = 0
    disabled_constraints: int = 0
    circular_references: int = 0


class Graph(BaseModel):
    """Nodes and edges for one database snapshot, in insertion order."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    generated: datetime = Field(default_factory=datetime.now)
    database_name: str = ""
    statistics: GraphStatistics = Field(default_factory=GraphStatistics)

    def get_node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


class LayoutOptions(BaseModel):
    """Parameters for :func:`schemagraph.engine.layout.apply_layout`.

    ``group_by_schema`` and ``minimize_crossings`` are accepted for callers
    that set them but do not change the computed positions.
    """

    model_config = {"frozen": True}

    algorithm: LayoutAlgorithm | str = LayoutAlgorithm.HIERARCHICAL
    node_spacing: float = 50.0
    layer_spacing: float = 100.0
    group_by_schema: bool = True
    minimize_crossings: bool = True
    seed: int = 42
    iterations: int = 100
    center_x: float = 400.0
    center_y: float = 400.0


class GraphFilter(BaseModel):
    """Criteria for :func:`schemagraph.engine.filtering.apply_filter`.

    Empty sets mean "no constraint". ``include_tables`` holds node ids.
    """

    model_config = {"frozen": True}

    include_schemas: frozenset[str] = frozenset()
    exclude_schemas: frozenset[str] = frozenset()
    include_tables: frozenset[str] = frozenset()
    orphaned_only: bool = False
    min_row_count: int = 0
    max_row_count: int = sys.maxsize
