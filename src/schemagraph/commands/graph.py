"""Command group: build, lay out, filter and analyze the schema graph."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from schemagraph.commands._base import ExamplesGroup
from schemagraph.domain.graph import GraphFilter
from schemagraph.domain.types import LayoutAlgorithm

if TYPE_CHECKING:
    from schemagraph.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  schemagraph -m shop.json graph build
  schemagraph -m shop.json graph layout --algorithm force --seed 7
  schemagraph -m shop.json graph filter --schema sales --min-rows 100
  schemagraph -m shop.json graph related sales.Orders --depth 2
  schemagraph -m shop.json graph cycles --exhaustive
  schemagraph -m shop.json graph schemas"""


@click.group(cls=ExamplesGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Build, lay out and analyze the foreign-key graph."""


@graph.command(
    examples="""\
  schemagraph -m shop.json graph build
  schemagraph --json -m shop.json graph build"""
)
@click.pass_obj
def build(app: AppContext) -> None:
    """Build the graph and show its statistics."""
    app.emit(app.graph_service("build").build())


@graph.command(
    examples="""\
  schemagraph -m shop.json graph layout
  schemagraph -m shop.json graph layout --algorithm circular
  schemagraph --json -m shop.json graph layout --algorithm force --seed 7"""
)
@click.option(
    "--algorithm",
    type=click.Choice([a.value for a in LayoutAlgorithm], case_sensitive=False),
    default=None,
    help="Layout algorithm (default from config: hierarchical).",
)
@click.option("--node-spacing", type=float, default=None, help="Horizontal gap between nodes.")
@click.option("--layer-spacing", type=float, default=None, help="Vertical gap between layers.")
@click.option("--seed", type=int, default=None, help="Seed for the force-directed start.")
@click.pass_obj
def layout(
    app: AppContext,
    algorithm: str | None,
    node_spacing: float | None,
    layer_spacing: float | None,
    seed: int | None,
) -> None:
    """Compute node positions."""
    app.emit(
        app.graph_service("layout").layout(
            algorithm=algorithm,
            node_spacing=node_spacing,
            layer_spacing=layer_spacing,
            seed=seed,
        )
    )


@graph.command(
    name="filter",
    examples="""\
  schemagraph -m shop.json graph filter --schema sales --schema hr
  schemagraph -m shop.json graph filter --exclude-schema audit --orphaned
  schemagraph -m shop.json graph filter --table sales.Orders --table sales.Customers""",
)
@click.option("--schema", "schemas", multiple=True, help="Only tables in this schema.")
@click.option("--exclude-schema", "exclude_schemas", multiple=True, help="Skip this schema.")
@click.option("--table", "tables", multiple=True, help="Only this table id (schema.table).")
@click.option("--orphaned", is_flag=True, help="Only tables without relationships.")
@click.option("--min-rows", type=int, default=0, show_default=True, help="Minimum row count.")
@click.option("--max-rows", type=int, default=None, help="Maximum row count.")
@click.pass_obj
def filter_cmd(
    app: AppContext,
    schemas: tuple[str, ...],
    exclude_schemas: tuple[str, ...],
    tables: tuple[str, ...],
    orphaned: bool,
    min_rows: int,
    max_rows: int | None,
) -> None:
    """Show the subset of tables matching all given criteria."""
    graph_filter = GraphFilter(
        include_schemas=frozenset(schemas),
        exclude_schemas=frozenset(exclude_schemas),
        include_tables=frozenset(tables),
        orphaned_only=orphaned,
        min_row_count=min_rows,
        max_row_count=sys.maxsize if max_rows is None else max_rows,
    )
    app.emit(app.graph_service("filter").filter(graph_filter))


@graph.command(
    examples="""\
  schemagraph -m shop.json graph related sales.Orders
  schemagraph -m shop.json graph related sales.Orders --depth 3"""
)
@click.argument("node_id")
@click.option("--depth", type=int, default=None, help="Maximum hops (default from config: 1).")
@click.pass_obj
def related(app: AppContext, node_id: str, depth: int | None) -> None:
    """Find tables connected to NODE_ID in either direction."""
    app.emit(app.graph_service("related").related(node_id, depth=depth))


@graph.command(
    examples="""\
  schemagraph -m shop.json graph cycles
  schemagraph -m shop.json graph cycles --exhaustive"""
)
@click.option(
    "--exhaustive",
    is_flag=True,
    help="Enumerate every elementary cycle instead of one per back-edge.",
)
@click.pass_obj
def cycles(app: AppContext, exhaustive: bool) -> None:
    """Detect circular foreign-key references."""
    app.emit(app.graph_service("cycles").cycles(exhaustive=exhaustive or None))


@graph.command(
    examples="""\
  schemagraph -m shop.json graph schemas
  schemagraph -q -m shop.json graph schemas"""
)
@click.pass_obj
def schemas(app: AppContext) -> None:
    """List schemas and their table counts."""
    app.emit(app.graph_service("schemas").schemas())
