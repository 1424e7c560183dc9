"""Human-readable rendering of ServiceResult, one renderer per ``op``.

Renderers draw onto an in-memory Rich console and :func:`render_result`
returns the text.  An ``op`` without a dedicated renderer is shown as
plain key/value lines.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from timesince.output.console import create_console, get_output, style_for_direction

if TYPE_CHECKING:
    from rich.console import Console

    from timesince.services.result import ServiceResult

Renderer = Callable[..., None]

_COMPONENTS = ("years", "months", "days", "hours", "minutes", "seconds", "milliseconds")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal; plain text when not attached to one."""
    console = create_console()
    if not result.ok:
        _render_error(result, console, verbose=verbose)
    else:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """The bare value for ``--quiet``: a number, a phrase, or ``key=value`` pairs."""
    if not result.ok:
        reason = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {reason}"

    data = result.data
    if isinstance(data.get("items"), list) and data["items"]:
        return "\n".join(str(item.get("format", "")) for item in data["items"])

    value = data.get("value")
    if isinstance(value, dict):
        return " ".join(f"{unit}={value.get(unit, 0)}" for unit in _COMPONENTS)
    return f"OK: {result.op}" if value is None else str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "ts.ok"), "  ", (result.op, "ts.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "ts.key"), (str(value), style)))


def _breakdown_table(value: dict[str, Any], *, verbose: bool = False) -> Table:
    """Remainders per unit; verbose adds the whole-unit totals column."""
    table = Table(pad_edge=False)
    table.add_column("Unit")
    table.add_column("Value", justify="right", style="ts.value")
    if verbose:
        table.add_column("Total", justify="right", style="dim")

    totals = value.get("totals") or {}
    for unit in _COMPONENTS:
        cells = [unit, str(value.get(unit, 0))]
        if verbose:
            cells.append(str(totals.get(unit, "")))
        table.add_row(*cells)
    return table


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    console.print(
        Text.assemble(
            ("ERROR", "ts.error"),
            "  ",
            (result.op, "ts.op"),
            ": ",
            error.message if error else "Unknown error",
        )
    )
    if verbose and error and error.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in error.detail.items():
            console.print(f"    {key}: {value}")


def _render_time_since(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a computed value: a breakdown table, an integer, or a phrase."""
    d = result.data
    value = d.get("value")
    _status_line(console, result)
    _field(console, "reference", d.get("reference", ""))
    _field(console, "format", d.get("format", ""))
    if d.get("format") == "relative":
        _field(console, "locale", d.get("locale", ""))

    if not isinstance(value, dict):
        _field(console, "value", value, style="ts.value")
        return

    is_future = bool(value.get("is_future"))
    _field(console, "observed", value.get("observation_instant", ""))
    _field(
        console,
        "direction",
        "future" if is_future else "past",
        style=style_for_direction(is_future),
    )
    console.print()
    console.print(_breakdown_table(value, verbose=verbose))


def _render_formats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the supported format tags."""
    _status_line(console, result)
    default = result.data.get("default")
    table = Table(pad_edge=False)
    table.add_column("Format", style="ts.value", no_wrap=True)
    table.add_column("Returns")
    for item in result.data.get("items", []):
        name = str(item.get("format", ""))
        if name == default:
            name = f"{name} (default)"
        table.add_row(name, str(item.get("returns", "")))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "time_since": _render_time_since,
    "list_formats": _render_formats,
}
