"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, schemagraph.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from schemagraph.domain.graph import LayoutOptions
from schemagraph.domain.types import LayoutAlgorithm


class LayoutConfig(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    algorithm: LayoutAlgorithm | str = LayoutAlgorithm.HIERARCHICAL
    node_spacing: float = 50.0
    layer_spacing: float = 100.0
    group_by_schema: bool = True
    minimize_crossings: bool = True
    seed: int = 42
    iterations: int = 100

    def to_options(self, **overrides: object) -> LayoutOptions:
        """Build :class:`LayoutOptions`, letting non-None *overrides* win."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return LayoutOptions(**values)


class CyclesConfig(BaseModel):
    """[cycles] section."""

    model_config = {"frozen": True}

    exhaustive: bool = False


class JoinsConfig(BaseModel):
    """[joins] section."""

    model_config = {"frozen": True}

    max_depth: int = Field(default=3, ge=1)


class NeighborhoodConfig(BaseModel):
    """[neighborhood] section."""

    model_config = {"frozen": True}

    depth: int = Field(default=1, ge=0)


class SnapshotConfig(BaseModel):
    """[snapshot] section."""

    model_config = {"frozen": True}

    path: Path | None = None
