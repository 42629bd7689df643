"""Tests for table and relationship metadata models."""

import pytest
from pydantic import ValidationError

from schemagraph.domain.metadata import RelationshipMetadata, TableMetadata, table_id


def test_table_id() -> None:
    assert table_id("sales", "Orders") == "sales.Orders"


class TestTableMetadata:
    def test_schema_alias(self) -> None:
        table = TableMetadata(schema="sales", name="Orders")
        assert table.schema_name == "sales"
        assert table.full_name == "sales.Orders"

    def test_field_name_accepted(self) -> None:
        assert TableMetadata(schema_name="hr", name="Employees").full_name == "hr.Employees"

    def test_defaults(self) -> None:
        table = TableMetadata(name="T")
        assert table.schema_name == "dbo"
        assert table.columns == []
        assert table.row_count == 0

    def test_frozen(self) -> None:
        table = TableMetadata(name="T")
        with pytest.raises(ValidationError):
            table.name = "U"  # type: ignore[misc]

    def test_dump_uses_alias(self) -> None:
        assert "schema" in TableMetadata(name="T").model_dump(by_alias=True)


class TestRelationshipMetadata:
    def test_endpoint_ids(self) -> None:
        rel = RelationshipMetadata(
            constraint_name="FK_Orders_Customers",
            source_schema="sales",
            source_table="Orders",
            source_column="CustomerId",
            target_schema="sales",
            target_table="Customers",
            target_column="CustomerId",
        )
        assert rel.source_id == "sales.Orders"
        assert rel.target_id == "sales.Customers"
        assert rel.enabled is True
        assert rel.delete_action == "NO ACTION"
        assert rel.update_action == "NO ACTION"
        assert rel.created is None
