"""Click command classes that carry usage examples.

Passing ``examples=`` to a command or group registers an eager
``--examples`` flag. It prints the text and exits before the command body
runs, so no snapshot is loaded and ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", None) or "")
    ctx.exit(0)


class _ExamplesMixin:
    """Keeps ``examples`` on the command and adds ``--examples`` when it is set."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class ExamplesCommand(_ExamplesMixin, click.Command):
    pass


class ExamplesGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command`` subcommands also accept ``examples=``."""

    command_class = ExamplesCommand
