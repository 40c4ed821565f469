"""Terminal output for the pkg-templates CLI.

Status lines and template descriptions are printed through a shared Rich
console; JSON listings are written to stdout directly. Library modules only
log, and ``setup_logging`` routes those records to stderr.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Created lazily so NO_COLOR is read at call time.
_console: Console | None = None


def _get_console() -> Console:
    """Return a shared Console instance, respecting NO_COLOR."""
    global _console
    if _console is None:
        no_color = "NO_COLOR" in os.environ
        _console = Console(
            highlight=False,
            no_color=no_color,
            stderr=False,
        )
    return _console


def _reset_console() -> None:
    """Reset the console (test-only)."""
    global _console
    _console = None


def setup_logging(debug: bool = False) -> None:
    """Route library log records to stderr through Rich."""
    handler = RichHandler(
        console=Console(stderr=True, no_color="NO_COLOR" in os.environ),
        show_time=False,
        show_path=False,
    )
    root = logging.getLogger("pkg_templates_yo")
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    root.propagate = False


# ── Status lines ────────────────────────────────────────────────────────────


def _status(symbol: str, style: str, msg: str) -> None:
    # Messages carry user input (hosts, paths), so they are never parsed as markup.
    _get_console().print(f"[{style}]{symbol}[/{style}] {escape(msg)}")


def heading(title: str) -> None:
    """Print the title of a generation run between blank lines."""
    con = _get_console()
    con.print()
    con.print(f"[bold cyan]{escape(title)}[/bold cyan]")
    con.print()


def success(msg: str) -> None:
    _status("✓", "green", msg)


def warning(msg: str) -> None:
    """Report a step that failed without invalidating the generated files."""
    _status("⚠", "yellow", msg)


def error(msg: str) -> None:
    _status("✗", "red", msg)


def action(msg: str) -> None:
    _status("→", "cyan", msg)


def bullet(msg: str) -> None:
    """List one generated path under the preceding action line."""
    _get_console().print(f"   • {escape(msg)}")


def print_text(msg: str, markup: bool = True) -> None:
    _get_console().print(msg, markup=markup)


# ── Machine-readable listings ───────────────────────────────────────────────


def emit_json(data: Any) -> None:
    """Write ``data`` to stdout as sorted, indented JSON.

    Used by ``licenses --json`` and ``plugins --json``; output is stable across
    runs so it can be diffed or piped to ``jq``.
    """
    sys.stdout.write(json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n")
    sys.stdout.flush()
