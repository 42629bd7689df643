"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from schemagraph.output.console import create_console, get_output, style_for_color

if TYPE_CHECKING:
    from rich.console import Console

    from schemagraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one id or path per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    if "cycles" in data:
        return "\n".join(data["cycles"])
    if "paths" in data:
        return "\n".join(" -> ".join(p["tables"]) for p in data["paths"])
    items = data.get("items")
    if isinstance(items, list) and items:
        return "\n".join(str(item.get("id", item.get("schema", ""))) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sg.ok"), Text(f"  {result.op}", style="sg.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    style = "sg.id" if key == "id" or key.endswith(("_id", "_table")) else ""
    console.print(Text(f"  {key}: ", style="sg.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the span tree collected by ``@traced`` (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    telemetry = result.meta.get("telemetry")
    if telemetry:
        _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    notes = span.get("annotations") or {}
    if notes:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _table(*columns: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for column in columns:
        if column == "ID":
            table.add_column(column, style="sg.id", no_wrap=True)
        else:
            table.add_column(column)
    return table


def _type_text(item: dict[str, Any]) -> Text:
    return Text(str(item.get("type", "")), style=style_for_color(str(item.get("color", ""))))


def _render_statistics(console: Console, stats: dict[str, Any]) -> None:
    for key, value in stats.items():
        _field(console, key, value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="sg.error"),
        Text(f"  {result.op}: ", style="sg.op"),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Graph renderers ───────────────────────────────────────────────────


def _render_build(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "database", d.get("database", ""))
    _field(console, "generated", d.get("generated", ""))
    _render_statistics(console, d.get("statistics", {}))
    types = d.get("node_types", {})
    if types:
        _field(console, "node_types", ", ".join(f"{k}={v}" for k, v in types.items()))
    _field(console, "schemas", ", ".join(d.get("schemas", [])))


def _render_layout(result: ServiceResult, console: Console) -> None:
    table = _table("ID", "Type", "X", "Y")
    for item in result.data.get("items", []):
        table.add_row(item["id"], _type_text(item), f"{item['x']:.2f}", f"{item['y']:.2f}")
    console.print(table)
    count = result.data.get("count", 0)
    console.print(f"\n{count} tables, {result.data.get('algorithm', '')} layout")


def _render_filter(result: ServiceResult, console: Console) -> None:
    table = _table("ID", "Rows", "Type", "In", "Out")
    for item in result.data.get("items", []):
        table.add_row(
            item["id"],
            str(item["rows"]),
            _type_text(item),
            str(item["incoming"]),
            str(item["outgoing"]),
        )
    console.print(table)
    edges = result.data.get("edges", [])
    console.print(f"\n{result.data.get('count', 0)} tables, {len(edges)} relationships")
    _render_statistics(console, result.data.get("statistics", {}))


def _render_related(result: ServiceResult, console: Console) -> None:
    table = _table("ID", "Depth", "Type", "Rows")
    for item in result.data.get("items", []):
        table.add_row(item["id"], str(item["depth"]), _type_text(item), str(item["rows"]))
    console.print(table)
    source = result.data.get("source_id", "")
    console.print(f"\n{result.data.get('count', 0)} tables related to {source}")


def _render_cycles(result: ServiceResult, console: Console) -> None:
    cycles = result.data.get("cycles", [])
    if not cycles:
        _status_line(console, result)
        console.print("  No circular references detected")
        return
    console.print(Text(f"{len(cycles)} circular reference(s)", style="sg.warning"))
    for i, cycle in enumerate(cycles, start=1):
        console.print(Text(f"  {i}. {cycle}"))


def _render_schemas(result: ServiceResult, console: Console) -> None:
    table = _table("Schema", "Tables")
    for item in result.data.get("items", []):
        table.add_row(item["schema"], str(item["tables"]))
    console.print(table)


# ── Join renderers ────────────────────────────────────────────────────


def _render_paths(result: ServiceResult, console: Console) -> None:
    d = result.data
    paths = d.get("paths", [])
    if not paths:
        _status_line(console, result)
        console.print(
            f"  No join path within {d.get('max_depth')} hops "
            f"from {d.get('source_id')} to {d.get('target_id')}"
        )
        return
    table = _table("#", "Hops", "Path", "Constraints")
    for i, path in enumerate(paths, start=1):
        table.add_row(
            str(i),
            str(path["distance"]),
            " -> ".join(path["tables"]),
            ", ".join(path["constraints"]),
        )
    console.print(table)


def _render_suggest(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "left_table", d.get("left_table", ""))
    _field(console, "right_table", d.get("right_table", ""))
    _field(console, "join_type", d.get("join_type", ""))
    _field(console, "auto_generated", d.get("is_auto_generated", False))
    if d.get("constraint_name"):
        _field(console, "constraint", d["constraint_name"])
    for cond in d.get("conditions", []):
        console.print(
            f"  ON {d['left_table']}.{cond['left_column']} "
            f"{cond['operator']} {d['right_table']}.{cond['right_column']}"
        )


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"), default=str)
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "build": _render_build,
    "layout": _render_layout,
    "filter": _render_filter,
    "related": _render_related,
    "cycles": _render_cycles,
    "schemas": _render_schemas,
    "paths": _render_paths,
    "suggest": _render_suggest,
}
