"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Loads the metadata snapshot lazily and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from schemagraph.infrastructure.snapshot import SnapshotError, load_snapshot
from schemagraph.output.formatters import OutputSettings, format_result
from schemagraph.services.result import ServiceResult

if TYPE_CHECKING:
    from schemagraph.config.settings import SchemaGraphSettings
    from schemagraph.domain.metadata import SchemaSnapshot
    from schemagraph.services.graph import GraphService
    from schemagraph.services.joins import JoinService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The snapshot is read on first use so ``--help`` and ``--version``
    never touch the filesystem.
    """

    def __init__(self, settings: SchemaGraphSettings) -> None:
        self.settings = settings
        self._snapshot: SchemaSnapshot | None = None

        from schemagraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from schemagraph.services.telemetry import enable_telemetry

            enable_telemetry()

    def snapshot(self, op: str) -> SchemaSnapshot:
        """The metadata snapshot, loaded on first access.

        Emits an error result and exits 1 when no snapshot is configured or
        the file cannot be loaded.
        """
        if self._snapshot is None:
            path = self.settings.resolved_snapshot
            if path is None:
                self.emit(
                    ServiceResult.failure(
                        op,
                        "NO_SNAPSHOT",
                        "No metadata snapshot given; use --snapshot or [snapshot] path",
                    )
                )
            try:
                self._snapshot = load_snapshot(path)
            except SnapshotError as exc:
                self.emit(
                    ServiceResult.failure(op, "INVALID_SNAPSHOT", exc.message, path=str(exc.path))
                )
        return self._snapshot

    def graph_service(self, op: str) -> GraphService:
        from schemagraph.services.graph import GraphService

        return GraphService(self.snapshot(op), self.settings)

    def join_service(self, op: str) -> JoinService:
        from schemagraph.services.joins import JoinService

        return JoinService(self.snapshot(op), self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
