"""Root CLI group for schemagraph with global flags and command registration."""

from __future__ import annotations

import click

from schemagraph import __version__
from schemagraph.commands import register_commands
from schemagraph.commands._context import AppContext
from schemagraph.config.settings import SchemaGraphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="schemagraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-m",
    "--snapshot",
    "snapshot_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Metadata snapshot JSON file.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    snapshot_path: str | None,
) -> None:
    """schemagraph: analyze foreign-key graphs of relational schemas."""
    settings = SchemaGraphSettings.from_cli(
        config_path=config_path,
        snapshot_path=snapshot_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
