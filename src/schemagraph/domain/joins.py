"""Join path and join suggestion results consumed by query-building code."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from schemagraph.domain.metadata import RelationshipMetadata


class JoinPath(BaseModel):
    """A chain of tables connected by foreign keys, with the keys used per hop."""

    model_config = {"frozen": True}

    tables: list[str]
    relationships: list[RelationshipMetadata] = Field(default_factory=list)
    distance: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_direct(self) -> bool:
        return self.distance == 1


class JoinCondition(BaseModel):
    """One ``left = right`` column pairing."""

    model_config = {"frozen": True}

    left_column: str
    right_column: str
    operator: str = "="


class JoinSuggestion(BaseModel):
    """Suggested join between two tables.

    ``is_auto_generated`` is False (and ``conditions`` empty) when no direct
    relationship exists; callers should ask for a manual join.
    """

    model_config = {"frozen": True}

    left_table: str
    right_table: str
    join_type: str = "INNER"
    is_auto_generated: bool = False
    constraint_name: str | None = None
    conditions: list[JoinCondition] = Field(default_factory=list)
