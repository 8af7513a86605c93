"""``jlink-wrap doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether the
runtime environment can build images: which ``jlink`` would be used,
where it came from, and what Python/OS is running.

This module lives in the CLI layer — it may import from ``infra`` and
``core``, and it renders via Rich when available.
"""

from __future__ import annotations

import platform
import sys

from jlink_wrap.cli import exit_codes
from jlink_wrap.cli.console import console
from jlink_wrap.core.escaping import HOST_QUOTING_STYLE
from jlink_wrap.core.models import PathValue
from jlink_wrap.infra.jlink_locator import JlinkStatus, locate_jlink
from jlink_wrap.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 11)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.11 required)[/red]"
    return "Python", version, status


def _jlink_check(located: JlinkStatus) -> Check:
    """Return (label, value, status) for the jlink row."""
    if located.found and located.path is not None:
        return "jlink", f"{located.path} ({located.source})", "[green]OK[/green]"
    return "jlink", "not found", "[red]FAIL[/red]"


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _quoting_check() -> Check:
    """Return (label, value, status) for the argument quoting row."""
    return "Quoting", HOST_QUOTING_STYLE.value, "[green]OK[/green]"


def _jlinkwrap_version_check() -> Check:
    """Return (label, value, status) for the jlink-wrap version row."""
    return "jlink-wrap", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\njlink-wrap doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<48} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<48} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(jdk_home: PathValue | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    located = locate_jlink(jdk_home)
    checks = [
        _jlinkwrap_version_check(),
        _python_version_check(),
        _jlink_check(located),
        _os_check(),
        _quoting_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="jlink-wrap doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()

    for warning in located.warnings:
        console.print(f"[yellow]WARNING[/yellow] {warning}")

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
