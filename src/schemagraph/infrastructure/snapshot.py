"""Metadata snapshot loading.

A snapshot is the JSON hand-off from a metadata provider::

    {
      "database": "Shop",
      "tables": [{"schema": "sales", "name": "Orders", "row_count": 1200,
                  "columns": [{"name": "OrderId", "is_primary_key": true}]}],
      "relationships": [{"constraint_name": "FK_Orders_Customers",
                         "source_schema": "sales", "source_table": "Orders",
                         "source_column": "CustomerId",
                         "target_schema": "sales", "target_table": "Customers",
                         "target_column": "CustomerId"}]
    }
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from schemagraph.domain.metadata import SchemaSnapshot


class SnapshotError(Exception):
    """A snapshot file is missing, unreadable, or not a valid snapshot."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def load_snapshot(path: Path) -> SchemaSnapshot:
    """Read and validate a snapshot JSON file.

    Raises:
        SnapshotError: If the file cannot be read or fails validation.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(path, exc.strerror or str(exc)) from exc

    try:
        return SchemaSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(p) for p in first.get("loc", ()))
        detail = f"{first.get('msg', 'invalid snapshot')}"
        if location:
            detail = f"{location}: {detail}"
        raise SnapshotError(path, f"{detail} ({len(errors)} error(s))") from exc
