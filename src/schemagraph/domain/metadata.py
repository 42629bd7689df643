"""Table and relationship metadata snapshots supplied by a metadata provider.

Immutable input shapes. Nothing in the engine mutates them; the graph
builder only reads from them.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


def table_id(schema: str, table: str) -> str:
    """Return the ``schema.table`` identifier used for nodes and join paths."""
    return f"{schema}.{table}"


class ColumnMetadata(BaseModel):
    """A single column of a table."""

    model_config = {"frozen": True}

    name: str
    data_type: str = ""
    nullable: bool = True
    is_primary_key: bool = False
    is_foreign_key: bool = False


class TableMetadata(BaseModel):
    """A table with its columns and approximate row count.

    Accepts ``schema`` as an alias for ``schema_name`` so provider JSON can use
    the natural key.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    schema_name: str = Field(default="dbo", alias="schema")
    name: str
    columns: list[ColumnMetadata] = Field(default_factory=list)
    row_count: int = 0

    @property
    def full_name(self) -> str:
        return table_id(self.schema_name, self.name)


class RelationshipMetadata(BaseModel):
    """A foreign-key constraint from a referencing table to a referenced table."""

    model_config = {"frozen": True}

    constraint_name: str
    source_schema: str = "dbo"
    source_table: str
    source_column: str
    target_schema: str = "dbo"
    target_table: str
    target_column: str
    enabled: bool = True
    delete_action: str = "NO ACTION"
    update_action: str = "NO ACTION"
    created: datetime | None = None

    @property
    def source_id(self) -> str:
        return table_id(self.source_schema, self.source_table)

    @property
    def target_id(self) -> str:
        return table_id(self.target_schema, self.target_table)


class SchemaSnapshot(BaseModel):
    """Everything the engine needs about one database, as handed over by a provider."""

    model_config = {"frozen": True}

    database: str | None = None
    tables: list[TableMetadata] = Field(default_factory=list)
    relationships: list[RelationshipMetadata] = Field(default_factory=list)
