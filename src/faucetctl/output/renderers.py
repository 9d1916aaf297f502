"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from faucetctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from faucetctl.services.result import ServiceResult

_AMOUNT_KEYS = frozenset({"sompi", "kas", "amount_per_claim", "amount_per_claim_kas"})


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

    Amount ops print the bare sompi value so the output can be piped
    straight into a config file or another command.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "convert_amount":
        return str(result.data["sompi"])
    if result.op == "format_amount":
        return str(result.data["kas"])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="faucet.ok")
    op = Text(f"  {result.op}", style="faucet.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="faucet.key")
    if key in _AMOUNT_KEYS:
        v = Text(str(value), style="faucet.amount")
    elif key == "path":
        v = Text(str(value), style="faucet.path")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="faucet.error")
    op = Text(f"  {result.op}", style="faucet.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err:
        console.print(Text("  detail:", style="dim"))
        console.print(f"    code: {err.code}")
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_amount(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render convert/format results as ``<sompi> sompi = <kas> KAS``."""
    _status_line(console, result)
    d = result.data
    line = Text("  ")
    line.append(str(d["sompi"]), style="faucet.amount")
    line.append(" sompi = ")
    line.append(str(d["kas"]), style="faucet.amount")
    line.append(" KAS")
    console.print(line)
    if verbose:
        for key in ("input", "shape"):
            if key in d:
                _field(console, key, d[key])


def _render_show_config(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("path", "kaspad_url", "port", "faucet_private_key"):
        _field(console, key, d[key])
    _field(
        console,
        "amount_per_claim",
        f"{d['amount_per_claim']} sompi ({d['amount_per_claim_kas']} KAS)",
    )
    _field(console, "claim_interval_seconds", d["claim_interval_seconds"])


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "convert_amount": _render_amount,
    "format_amount": _render_amount,
    "show_config": _render_show_config,
    "init_config": _render_generic,
    "validate_config": _render_generic,
}
