"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dyngroups.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dyngroups.services.result import ServiceResult


def render_result(
    result: ServiceResult, *, verbose: bool = False, no_color: bool = False
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=no_color)
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: bare members or items, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "get_group":
        return "\n".join(data.get("members", []))
    if result.op == "list_items":
        return "\n".join(data.get("items", []))
    if result.op == "resolve_groups":
        return "\n".join(
            f"{name}: {' '.join(members)}" for name, members in data.get("groups", {}).items()
        )
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dg.ok"), Text(f"  {result.op}", style="dg.op"))


def _members_text(members: list[str]) -> Text:
    if not members:
        return Text("(empty)", style="dg.empty")
    return Text(", ".join(members), style="dg.item")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="dg.error"),
        Text(f"  {result.op}", style="dg.op"),
        Text(" — "),
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_groups(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render resolve_groups as a Group / Members table."""
    groups: dict[str, list[str]] = result.data.get("groups", {})
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Group", style="dg.group", no_wrap=True)
    table.add_column("Members")
    table.add_column("Count", style="dg.count", justify="right")
    for name, members in groups.items():
        table.add_row(name, _members_text(members), str(len(members)))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(groups))} groups")


def _render_single_group(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    members: list[str] = result.data.get("members", [])
    name = str(result.data.get("name"))
    console.print(Text.assemble(("  group: ", "dg.key"), (name, "dg.group")))
    if not members:
        console.print(Text("  (empty)", style="dg.empty"))
    for member in members:
        console.print(Text(f"  - {member}", style="dg.item"))


def _render_items(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items: list[str] = result.data.get("items", [])
    for item in items:
        console.print(Text(item, style="dg.item"))
    console.print(f"\n{result.data.get('count', len(items))} items")


def _render_specs(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render describe_groups with one column per specification field."""
    specs: dict[str, dict[str, list[str]]] = result.data.get("specs", {})
    fields = ("include", "exclude", "include_groups", "exclude_groups")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Group", style="dg.group", no_wrap=True)
    for field in fields:
        table.add_column(field)
    for name, spec in specs.items():
        # "-" marks an absent field, "(empty)" a present but empty one.
        cells: list[Any] = [
            _members_text(spec[field]) if field in spec else Text("-", style="dim")
            for field in fields
        ]
        table.add_row(name, *cells)
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        console.print(Text.assemble((f"  {key}: ", "dg.key"), str(value)))


_OP_RENDERERS: dict[str, Any] = {
    "resolve_groups": _render_groups,
    "get_group": _render_single_group,
    "list_items": _render_items,
    "describe_groups": _render_specs,
}
