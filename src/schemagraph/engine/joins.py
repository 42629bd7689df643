"""Join Path Finder and Join Suggestion over raw relationship metadata.

Independent of the built :class:`~schemagraph.domain.graph.Graph`: both work
directly on the foreign-key list so query-building code can call them
without building a graph first. Table ids compare case-insensitively.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator

from schemagraph.domain.joins import JoinCondition, JoinPath, JoinSuggestion
from schemagraph.domain.metadata import RelationshipMetadata

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 3


def find_join_paths(
    from_table: str,
    to_table: str,
    relationships: Iterable[RelationshipMetadata],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[JoinPath]:
    """Enumerate every path of at most *max_depth* hops between two tables.

    A foreign key can be walked from the referencing table to the
    referenced one and back. A table appears at most once per path, but
    sibling branches may reuse it. Paths are sorted by distance; within a
    distance, referencing-to-referenced hops are explored first.

    Args:
        from_table: Starting ``schema.table`` id.
        to_table: Destination ``schema.table`` id.
        relationships: The full foreign-key list.
        max_depth: Maximum number of hops per path.
    """
    outgoing: dict[str, list[RelationshipMetadata]] = defaultdict(list)
    incoming: dict[str, list[RelationshipMetadata]] = defaultdict(list)
    for rel in relationships:
        outgoing[rel.source_id.casefold()].append(rel)
        incoming[rel.target_id.casefold()].append(rel)

    def hops(table: str) -> Iterator[tuple[RelationshipMetadata, str]]:
        key = table.casefold()
        for rel in outgoing.get(key, ()):
            yield rel, rel.target_id
        for rel in incoming.get(key, ()):
            yield rel, rel.source_id

    target = to_table.casefold()
    paths: list[JoinPath] = []
    tables = [from_table]
    used: list[RelationshipMetadata] = []
    visited: set[str] = set()

    def walk(current: str, depth: int) -> None:
        if depth > max_depth:
            return
        if current.casefold() == target:
            paths.append(
                JoinPath(tables=list(tables), relationships=list(used), distance=len(used))
            )
            return

        visited.add(current.casefold())
        for rel, following in hops(current):
            if following.casefold() in visited:
                continue
            tables.append(following)
            used.append(rel)
            walk(following, depth + 1)
            tables.pop()
            used.pop()
        visited.discard(current.casefold())

    walk(from_table, 0)
    paths.sort(key=lambda p: p.distance)
    logger.debug("Found %d join path(s) from %s to %s", len(paths), from_table, to_table)
    return paths


def suggest_join(
    left_table: str,
    right_table: str,
    relationships: Iterable[RelationshipMetadata],
) -> JoinSuggestion:
    """Suggest an equality join from a direct foreign key between two tables.

    The first relationship linking the tables in either direction wins; its
    columns are paired so the left column belongs to *left_table*. Without
    one, the suggestion is not auto-generated and has no conditions.
    """
    left = left_table.casefold()
    right = right_table.casefold()
    for rel in relationships:
        source = rel.source_id.casefold()
        referenced = rel.target_id.casefold()
        if source == left and referenced == right:
            condition = JoinCondition(left_column=rel.source_column, right_column=rel.target_column)
        elif source == right and referenced == left:
            condition = JoinCondition(left_column=rel.target_column, right_column=rel.source_column)
        else:
            continue
        return JoinSuggestion(
            left_table=left_table,
            right_table=right_table,
            is_auto_generated=True,
            constraint_name=rel.constraint_name,
            conditions=[condition],
        )
    return JoinSuggestion(left_table=left_table, right_table=right_table)
