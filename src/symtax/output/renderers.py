"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from symtax.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from symtax.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict) and "id" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="symtax.ok")
    op = Text(f"  {result.op}", style="symtax.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="symtax.key")
    if key in ("taxonomy", "name", "contract"):
        v = Text(str(value), style="symtax.id")
    elif key == "type_name":
        v = Text(str(value), style="symtax.type")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _bounds_text(bounds: dict[str, Any] | None) -> str:
    if not bounds:
        return ""
    upper = bounds["max_occurrences"] or "∞"
    text = f"{bounds['min_occurrences']}..{upper}"
    if bounds["bundle_with"]:
        text += f" with {bounds['bundle_with']}"
    return text


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="symtax.warning"), Text(warning))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="symtax.error")
    op = Text(f"  {result.op}", style="symtax.op")
    console.print(label, op, Text(" — "), Text(msg))

    if err is not None:
        _field(console, "code", err.code)

    d = result.data
    if result.op == "validate" and d:
        _field(console, "taxonomy", d["taxonomy"])
        if d.get("contract"):
            _field(console, "contract", d["contract"])
        for key in ("position", "cursor", "occurrences"):
            if d.get(key) is not None:
                _field(console, key, d[key])

    if verbose and err is not None and err.detail:
        for key, value in err.detail.items():
            _field(console, key, _json.dumps(value) if isinstance(value, (dict, list)) else value)
        _render_warnings(console, result)


# ── Validation ────────────────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "taxonomy", d["taxonomy"])
    if d.get("contract"):
        _field(console, "contract", d["contract"])
    _field(console, "transactions", d["transactions"])
    _field(console, "outcome", d["outcome"])
    if verbose:
        _field(console, "message", d["message"])
        _render_warnings(console, result)


# ── Taxonomies ────────────────────────────────────────────────────────


def _render_taxonomy_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        _status_line(console, result)
        console.print("  No taxonomies registered.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Taxonomy", style="symtax.id", no_wrap=True)
    table.add_column("Positions", justify="right")
    table.add_column("Repeatable", justify="right")
    table.add_column("Types", justify="right")
    if verbose:
        table.add_column("Source", style="dim")

    for item in items:
        row = [
            str(item["id"]),
            str(item["positions"]),
            str(item["repeatable"]),
            str(item["types"]),
        ]
        if verbose:
            row.append(str(item.get("source") or ""))
        table.add_row(*row)
    console.print(table)
    if verbose:
        _render_warnings(console, result)


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "name", d["name"])
    if verbose and d.get("source"):
        _field(console, "source", d["source"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Type", style="symtax.type")
    table.add_column("Code", justify="right")
    table.add_column("Required")
    table.add_column("Repeats", style="symtax.bounds")

    for entry in d["entries"]:
        required = Text("required", style="symtax.required") if entry["required"] else Text(
            "optional", style="symtax.optional"
        )
        table.add_row(
            str(entry["position"]),
            entry["type_name"],
            str(entry["type"]),
            required,
            _bounds_text(entry.get("bounds")),
        )
    console.print(table)


def _render_accepts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "taxonomy", d["taxonomy"])
    _field(console, "type_name", d["type_name"])
    _field(console, "type", d["type"])
    _field(console, "accepted", "yes" if d["accepted"] else "no")


def _render_types(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Type", style="symtax.type", no_wrap=True)
    table.add_column("Code", justify="right")
    table.add_column("Hex", style="dim")
    for item in result.data.get("items", []):
        table.add_row(item["id"], str(item["code"]), item["hex"])
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "list_taxonomies": _render_taxonomy_list,
    "describe_taxonomy": _render_describe,
    "accepts_type": _render_accepts,
    "list_types": _render_types,
}
