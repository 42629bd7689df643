"""Shared pytest fixtures and test helpers for schemagraph tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from schemagraph.domain.graph import Graph
from schemagraph.domain.metadata import (
    ColumnMetadata,
    RelationshipMetadata,
    SchemaSnapshot,
    TableMetadata,
)
from schemagraph.engine.builder import build_graph
from schemagraph.services.telemetry import disable_telemetry

# ---------------------------------------------------------------------------
# Shared test helpers (used across engine, service and command tests)
# ---------------------------------------------------------------------------


def make_table(
    table_id: str,
    *,
    rows: int = 1000,
    pk: str | None = "Id",
    fks: tuple[str, ...] = (),
) -> TableMetadata:
    """Build table metadata from a ``schema.table`` id."""
    schema, name = table_id.split(".", 1)
    columns: list[ColumnMetadata] = []
    if pk:
        columns.append(
            ColumnMetadata(name=pk, data_type="int", nullable=False, is_primary_key=True)
        )
    columns.extend(ColumnMetadata(name=fk, data_type="int", is_foreign_key=True) for fk in fks)
    return TableMetadata(schema=schema, name=name, columns=columns, row_count=rows)


def make_fk(
    name: str,
    source: str,
    target: str,
    *,
    source_column: str = "Id",
    target_column: str = "Id",
    enabled: bool = True,
) -> RelationshipMetadata:
    """Build a foreign key from ``schema.table`` ids."""
    source_schema, source_table = source.split(".", 1)
    target_schema, target_table = target.split(".", 1)
    return RelationshipMetadata(
        constraint_name=name,
        source_schema=source_schema,
        source_table=source_table,
        source_column=source_column,
        target_schema=target_schema,
        target_table=target_table,
        target_column=target_column,
        enabled=enabled,
    )


def chain_graph(*table_ids: str, rows: int = 1000) -> Graph:
    """Build a graph with one foreign key from each table to the next."""
    tables = [make_table(t, rows=rows) for t in table_ids]
    fks = [
        make_fk(f"FK_{i}", table_ids[i], table_ids[i + 1])
        for i in range(len(table_ids) - 1)
    ]
    return build_graph(tables, fks)


def shop_snapshot() -> SchemaSnapshot:
    """A small order-management schema.

    OrderItems -> Orders -> Customers, Orders -> hr.Employees,
    OrderItems -> Products -> Categories (disabled), audit.Log isolated.
    """
    tables = [
        make_table("sales.Customers", rows=500, pk="CustomerId"),
        make_table("sales.Orders", rows=1200, pk="OrderId", fks=("CustomerId", "EmployeeId")),
        make_table("sales.OrderItems", rows=5000, pk="OrderItemId", fks=("OrderId", "ProductId")),
        make_table("sales.Products", rows=80, pk="ProductId", fks=("CategoryId",)),
        make_table("sales.Categories", rows=12, pk="CategoryId"),
        make_table("hr.Employees", rows=40, pk="EmployeeId"),
        make_table("audit.Log", rows=10000, pk="LogId"),
    ]
    relationships = [
        make_fk(
            "FK_Orders_Customers",
            "sales.Orders",
            "sales.Customers",
            source_column="CustomerId",
            target_column="CustomerId",
        ),
        make_fk(
            "FK_Orders_Employees",
            "sales.Orders",
            "hr.Employees",
            source_column="EmployeeId",
            target_column="EmployeeId",
        ),
        make_fk(
            "FK_OrderItems_Orders",
            "sales.OrderItems",
            "sales.Orders",
            source_column="OrderId",
            target_column="OrderId",
        ),
        make_fk(
            "FK_OrderItems_Products",
            "sales.OrderItems",
            "sales.Products",
            source_column="ProductId",
            target_column="ProductId",
        ),
        make_fk(
            "FK_Products_Categories",
            "sales.Products",
            "sales.Categories",
            source_column="CategoryId",
            target_column="CategoryId",
            enabled=False,
        ),
    ]
    return SchemaSnapshot(database="Shop", tables=tables, relationships=relationships)


def dump_snapshot(snapshot: SchemaSnapshot, path: Path) -> Path:
    """Write *snapshot* as the JSON document ``load_snapshot`` reads."""
    path.write_text(snapshot.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep user env vars and telemetry state out of every test."""
    for key in list(os.environ):
        if key.startswith("SCHEMAGRAPH_"):
            monkeypatch.delenv(key)
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by configure_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    watched = [logging.getLogger(name) for name in ("schemagraph", "networkx")]
    levels = [logger.level for logger in watched]
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for logger, level in zip(watched, levels, strict=True):
        logger.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def shop() -> SchemaSnapshot:
    return shop_snapshot()


@pytest.fixture
def shop_graph(shop: SchemaSnapshot) -> Graph:
    return build_graph(shop.tables, shop.relationships, database_name=shop.database)


@pytest.fixture
def snapshot_file(tmp_path: Path, shop: SchemaSnapshot) -> Path:
    """The shop snapshot written to a JSON file."""
    return dump_snapshot(shop, tmp_path / "shop.json")


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so no stray schemagraph.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")``.
    """
    monkeypatch.chdir(tmp_path)
