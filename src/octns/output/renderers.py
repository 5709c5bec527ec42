"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from octns.output.console import create_console, get_output, style_for_key

if TYPE_CHECKING:
    from rich.console import Console

    from octns.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    Resolution ops print the bare answer so the output can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "octns.ok"), (f"  {result.op}", "octns.op")))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text.assemble((f"  {key}: ", "octns.key"), (str(value), style_for_key(key))))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "octns.error"), (f"  {result.op}", "octns.op"), f" — {msg}")
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_mapping(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render lookup/reverse results as ``domain → address``."""
    _status_line(console, result)
    line = Text("  ")
    line.append(str(result.data.get("domain", "")), style="octns.domain")
    line.append("  →  ")
    line.append(str(result.data.get("address", "")), style="octns.address")
    console.print(line)


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "address", result.data.get("address", ""))
    if verbose or result.data.get("via") == "domain":
        _field(console, "input", result.data.get("input", ""))
        _field(console, "via", result.data.get("via", ""))


def _render_check_name(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "domain", result.data.get("domain", ""))
    if verbose:
        _field(console, "name", result.data.get("name", ""))
        _field(console, "length", result.data.get("length", ""))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: key-value listing of the payload."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "lookup": _render_mapping,
    "reverse": _render_mapping,
    "resolve": _render_resolve,
    "check_name": _render_check_name,
}

_QUIET_KEYS: dict[str, str] = {
    "lookup": "address",
    "reverse": "domain",
    "resolve": "address",
    "check_name": "domain",
}
