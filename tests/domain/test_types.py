"""Tests for domain type enums: parametrized."""

import pytest

from schemagraph.domain.types import EdgeType, LayoutAlgorithm, NodeColor, NodeType

ENUM_CASES = [
    (
        NodeType,
        {"standard", "primary", "lookup", "orphaned", "junction"},
    ),
    (
        NodeColor,
        {"blue", "green", "orange", "red", "purple", "gray", "yellow"},
    ),
    (
        EdgeType,
        {"one_to_one", "one_to_many", "many_to_many"},
    ),
    (
        LayoutAlgorithm,
        {"hierarchical", "circular", "force", "grid", "organic"},
    ),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum has the expected members with matching string values."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)
