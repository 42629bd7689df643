"""Subcommand modules for schemagraph.

Provides register_commands() which uses deferred imports to keep
``schemagraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from schemagraph.commands.graph import graph
    from schemagraph.commands.join import join

    cli.add_command(graph)
    cli.add_command(join)
