"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs:   CLI flags passed by Click
  2. Env vars:      ``SCHEMAGRAPH_*`` prefix, ``__`` for nested sections
  3. TOML file:     ``schemagraph.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from schemagraph.config.discovery import find_config
from schemagraph.config.models import (
    CyclesConfig,
    JoinsConfig,
    LayoutConfig,
    NeighborhoodConfig,
    SnapshotConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``schemagraph.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            self._resolve_snapshot_path(toml_path.parent)

    def _resolve_snapshot_path(self, base: Path) -> None:
        # A relative snapshot path is relative to the config file, not the CWD.
        section = self._data.get("snapshot")
        if isinstance(section, dict) and isinstance(section.get("path"), str):
            path = Path(section["path"])
            if not path.is_absolute():
                section["path"] = str(base / path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class SchemaGraphSettings(BaseSettings):
    """Settings for the whole schemagraph CLI, frozen after construction.

    Stored on the Click context object at the CLI root level.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        snapshot_path: ``--snapshot`` override; falls back to ``[snapshot] path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SCHEMAGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    snapshot_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    cycles: CyclesConfig = Field(default_factory=CyclesConfig)
    joins: JoinsConfig = Field(default_factory=JoinsConfig)
    neighborhood: NeighborhoodConfig = Field(default_factory=NeighborhoodConfig)
    snapshot: SnapshotConfig = Field(default_factory=SnapshotConfig)

    @property
    def resolved_snapshot(self) -> Path | None:
        """The metadata snapshot to load: CLI/env override, then TOML."""
        return self.snapshot_path or self.snapshot.path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> SchemaGraphSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers
        ``schemagraph.toml`` by walking up from *start* (default: cwd).
        CLI flags whose value is None are left to lower-priority sources.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
