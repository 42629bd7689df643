"""Command group: join paths and join suggestions between tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from schemagraph.commands._base import ExamplesGroup

if TYPE_CHECKING:
    from schemagraph.commands._context import AppContext

_JOIN_EXAMPLES = """\
  schemagraph -m shop.json join paths sales.OrderItems sales.Customers
  schemagraph -m shop.json join paths sales.OrderItems hr.Employees --max-depth 2
  schemagraph -m shop.json join suggest sales.Orders sales.Customers"""


@click.group(cls=ExamplesGroup, examples=_JOIN_EXAMPLES)
def join() -> None:
    """Find how tables can be joined through foreign keys."""


@join.command(
    examples="""\
  schemagraph -m shop.json join paths sales.OrderItems sales.Customers
  schemagraph --json -m shop.json join paths sales.OrderItems sales.Customers"""
)
@click.argument("from_table")
@click.argument("to_table")
@click.option("--max-depth", type=click.IntRange(min=1), default=None, help="Maximum hops.")
@click.pass_obj
def paths(app: AppContext, from_table: str, to_table: str, max_depth: int | None) -> None:
    """List join paths from FROM_TABLE to TO_TABLE, shortest first."""
    app.emit(app.join_service("paths").paths(from_table, to_table, max_depth=max_depth))


@join.command(
    examples="""\
  schemagraph -m shop.json join suggest sales.Orders sales.Customers"""
)
@click.argument("left_table")
@click.argument("right_table")
@click.pass_obj
def suggest(app: AppContext, left_table: str, right_table: str) -> None:
    """Suggest a join condition between LEFT_TABLE and RIGHT_TABLE."""
    app.emit(app.join_service("suggest").suggest(left_table, right_table))
