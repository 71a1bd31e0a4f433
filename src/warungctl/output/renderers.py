"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from warungctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from warungctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Prints the one thing a script would want: the order link, the page
    path, or the status.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if "url" in d:
        return str(d["url"])
    if d.get("orders"):
        return "\n".join(str(order["url"]) for order in d["orders"])
    if "path" in d:
        return str(d["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="warung.ok")
    op = Text(f"  {result.op}", style="warung.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="warung.key")
    if key == "path":
        v = Text(str(value), style="warung.path")
    elif key == "url":
        v = Text(str(value), style="warung.url")
    elif key.startswith("total"):
        v = Text(str(value), style="warung.money")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _cart_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Item", style="warung.label")
    table.add_column("Qty", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Subtotal", justify="right", style="warung.money")
    for item in items:
        table.add_row(
            Text(str(item.get("label", ""))),
            str(item.get("quantity", "")),
            str(item.get("unit_price", "")),
            str(item.get("subtotal", "")),
        )
    return table


def _render_findings(console: Console, findings: list[dict[str, Any]]) -> None:
    for finding in findings:
        line = Text("  ")
        line.append(str(finding.get("kind", "")), style="warung.warning")
        line.append(f" [{finding.get('field', '')}]: {finding.get('message', '')}")
        console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="warung.error")
    op = Text(f"  {result.op}", style="warung.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    findings = result.data.get("findings")
    if findings:
        _render_findings(console, findings)
    items = result.data.get("items")
    if items:
        console.print(_cart_table(items))
        _field(console, "total", result.data.get("total_display", result.data.get("total")))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Site renderers ────────────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render findings grouped under the document path."""
    findings = result.data.get("findings", [])
    if not findings:
        console.print("[warung.ok]OK[/warung.ok]  No findings.")
        return
    console.print(Text(str(result.data.get("document", "")), style="bold"))
    _render_findings(console, findings)
    console.print(f"\n{len(findings)} finding(s); rendering proceeds regardless")


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("path", "skin"):
        if key in d:
            _field(console, key, d[key])
    if "regions_bound" in d:
        _field(console, "regions", f"{d['regions_bound']}/{d.get('regions_declared', '?')} bound")
    if verbose:
        _render_meta(console, result)


def _render_customize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "mutator", d.get("mutator", ""))
    _field(console, "refreshed", ", ".join(d.get("dirty", [])))
    changed = d.get("changed_regions", [])
    _field(console, "changed_regions", len(changed))
    if verbose:
        for selector in changed:
            console.print(f"    {selector}")
    _field(console, "path", d.get("path", ""))
    if d.get("written"):
        _field(console, "written", "site document updated")


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("path", "name", "skin"):
        if key in d:
            _field(console, key, d[key])
    files = d.get("files", [])
    _field(console, "files_created", len(files))
    if verbose:
        for f in files:
            console.print(f"    {f}")


# ── Order renderer ────────────────────────────────────────────────────


def _render_order(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the cart, then the composed message and its link."""
    _status_line(console, result)
    d = result.data

    if not d.get("cart_enabled", True):
        orders = d.get("orders", [])
        _field(console, "direct_orders", len(orders))
        for order in orders:
            console.print(Panel(Text(order["message"]), title="message", expand=False))
            _field(console, "url", order["url"])
        return

    # the last placed order is the one shown in full below
    orders = d.get("orders", [])
    earlier = orders[:-1] if "message" in d else orders
    for order in earlier:
        _field(console, "placed", order.get("total_display", order.get("total", "")))
        _field(console, "url", order["url"])

    items = d.get("items", [])
    if items:
        console.print(_cart_table(items))
    _field(console, "total", d.get("total_display", d.get("total", 0)))
    _field(console, "state", d.get("state", ""))

    if "message" in d:
        console.print(Panel(Text(d["message"]), title="message", expand=False))
        _field(console, "url", d["url"])
        if not d.get("handed_off", True):
            console.print("  [warung.warning]handoff dismissed; cart kept[/warung.warning]")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "render": _render_render,
    "customize": _render_customize,
    "init": _render_init,
    "order": _render_order,
}
