"""Classification enums for schema graph nodes, edges and layouts.

String-valued so they serialize cleanly in ``--json`` output and TOML config.
"""

from __future__ import annotations

from enum import StrEnum


class NodeType(StrEnum):
    """Role a table plays in the foreign-key graph."""

    STANDARD = "standard"
    PRIMARY = "primary"
    LOOKUP = "lookup"
    ORPHANED = "orphaned"
    JUNCTION = "junction"


class NodeColor(StrEnum):
    """Rendering colour tag derived from :class:`NodeType`."""

    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    PURPLE = "purple"
    GRAY = "gray"
    YELLOW = "yellow"


class EdgeType(StrEnum):
    """Cardinality of a relationship. Foreign keys are always one-to-many today."""

    ONE_TO_ONE = "one_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"


class LayoutAlgorithm(StrEnum):
    """Selectable layout algorithms.

    ``ORGANIC`` is accepted but has no implementation of its own; like any
    unrecognized value it is laid out hierarchically.
    """

    HIERARCHICAL = "hierarchical"
    CIRCULAR = "circular"
    FORCE = "force"
    GRID = "grid"
    ORGANIC = "organic"
