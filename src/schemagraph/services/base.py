"""BaseService: shared foundation for schemagraph services.

Every service receives the metadata snapshot it works on and the active
settings. The graph is built lazily on first use and then reused for the
lifetime of the service instance; nothing is cached across instances.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemagraph.config.settings import SchemaGraphSettings
from schemagraph.engine.builder import build_graph

if TYPE_CHECKING:
    from schemagraph.domain.graph import Graph
    from schemagraph.domain.metadata import SchemaSnapshot


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def build(self) -> ServiceResult:
                graph = self.graph
                ...
    """

    def __init__(
        self, snapshot: SchemaSnapshot, settings: SchemaGraphSettings | None = None
    ) -> None:
        self._snapshot = snapshot
        self._settings = settings or SchemaGraphSettings()
        self._graph: Graph | None = None

    @property
    def graph(self) -> Graph:
        """The graph for the snapshot, building it on first access."""
        if self._graph is None:
            self._graph = build_graph(
                self._snapshot.tables,
                self._snapshot.relationships,
                database_name=self._snapshot.database,
                exhaustive_cycles=self._settings.cycles.exhaustive,
            )
        return self._graph

    def _has_table(self, table_id: str) -> bool:
        key = table_id.casefold()
        return any(t.full_name.casefold() == key for t in self._snapshot.tables)
