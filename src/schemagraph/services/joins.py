"""JoinService: join paths and join suggestions for query building."""

from __future__ import annotations

from typing import Any

from schemagraph.domain.joins import JoinPath
from schemagraph.engine.joins import find_join_paths, suggest_join
from schemagraph.services.base import BaseService
from schemagraph.services.result import ServiceResult
from schemagraph.services.telemetry import traced


def _path_item(path: JoinPath) -> dict[str, Any]:
    return {
        "tables": path.tables,
        "distance": path.distance,
        "is_direct": path.is_direct,
        "constraints": [rel.constraint_name for rel in path.relationships],
    }


class JoinService(BaseService):
    """Finds how two tables can be joined through foreign keys."""

    def _missing(self, op: str, *table_ids: str) -> ServiceResult | None:
        for table_id in table_ids:
            if not self._has_table(table_id):
                return ServiceResult.failure(
                    op, "NOT_FOUND", f"Table '{table_id}' not found in snapshot"
                )
        return None

    @traced
    def paths(
        self,
        from_table: str,
        to_table: str,
        *,
        max_depth: int | None = None,
    ) -> ServiceResult:
        """List every join path between two tables, shortest first.

        An empty list is a successful result.
        """
        missing = self._missing("paths", from_table, to_table)
        if missing is not None:
            return missing

        if max_depth is None:
            max_depth = self._settings.joins.max_depth
        found = find_join_paths(
            from_table, to_table, self._snapshot.relationships, max_depth=max_depth
        )
        return ServiceResult(
            ok=True,
            op="paths",
            data={
                "source_id": from_table,
                "target_id": to_table,
                "max_depth": max_depth,
                "count": len(found),
                "paths": [_path_item(p) for p in found],
            },
        )

    @traced
    def suggest(self, left_table: str, right_table: str) -> ServiceResult:
        """Suggest a join condition from a direct foreign key."""
        missing = self._missing("suggest", left_table, right_table)
        if missing is not None:
            return missing

        suggestion = suggest_join(left_table, right_table, self._snapshot.relationships)
        warnings: list[str] = []
        if not suggestion.is_auto_generated:
            warnings.append(
                f"No direct relationship between {left_table} and {right_table}; "
                "specify the join condition manually"
            )
        return ServiceResult(
            ok=True,
            op="suggest",
            data=suggestion.model_dump(),
            warnings=warnings,
        )
