"""Tests for --examples flag on CLI commands.

Parametrized to cover all commands that define examples text.
"""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from schemagraph.cli import cli
from schemagraph.commands._base import ExamplesCommand, ExamplesGroup

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["graph", "--examples"], ["schemagraph -m shop.json graph build", "graph cycles"]),
    (["graph", "build", "--examples"], ["--json"]),
    (["graph", "layout", "--examples"], ["--algorithm force --seed 7"]),
    (["graph", "filter", "--examples"], ["--exclude-schema audit"]),
    (["graph", "related", "--examples"], ["--depth 3"]),
    (["graph", "cycles", "--examples"], ["--exhaustive"]),
    (["graph", "schemas", "--examples"], ["graph schemas"]),
    (["join", "--examples"], ["join paths", "join suggest"]),
    (["join", "paths", "--examples"], ["sales.OrderItems sales.Customers"]),
    (["join", "suggest", "--examples"], ["join suggest"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples")


@pytest.mark.usefixtures("_isolated_dir")
@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.usefixtures("_isolated_dir")
def test_examples_not_loading_snapshot(cli_runner: CliRunner) -> None:
    """--examples exits before any snapshot is needed."""
    result = cli_runner.invoke(cli, ["graph", "build", "--examples"])
    assert result.exit_code == 0
    assert "No metadata snapshot" not in result.output


@pytest.mark.usefixtures("_isolated_dir")
def test_help_does_not_list_examples_text(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["graph", "layout", "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
    assert "--seed 7" not in result.output


def test_no_flag_without_examples() -> None:
    command = ExamplesCommand("plain")
    assert [p.name for p in command.params] == []


def test_group_subcommands_accept_examples(cli_runner: CliRunner) -> None:
    group = ExamplesGroup("tools")

    @group.command(examples="  tools ping")
    def ping() -> None:
        click.echo("pong")

    assert isinstance(ping, ExamplesCommand)
    result = cli_runner.invoke(group, ["ping", "--examples"])
    assert result.exit_code == 0
    assert result.output == "Examples for 'tools ping':\n\n  tools ping\n"
    assert cli_runner.invoke(group, ["ping"]).output == "pong\n"
