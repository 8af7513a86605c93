"""CLI console helpers with optional Rich support.

Module-level imports of Rich are avoided so bootstrap paths
(``--help``, ``--version``) and plain builds keep working when Rich is
not installed; output then degrades to plain stderr lines.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from jlink_wrap.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


def escape_markup(text: str) -> str:
    """Escape Rich markup in *text* (identity when Rich is missing)."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else strip markup and print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            plain = (
                _MARKUP_TAG.sub("", obj) if isinstance(obj, str) else obj
                for obj in objects
            )
            print(*plain, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


class ConsoleReporter:
    """:class:`~jlink_wrap.core.protocols.Reporter` that writes to :data:`console`.

    Lines are escaped before rendering so tool output containing square
    brackets is shown verbatim.
    """

    def info(self, line: str) -> None:
        console.print(escape_markup(line))

    def warn(self, line: str) -> None:
        console.print(f"[yellow]WARNING[/yellow] {escape_markup(line)}")

    def error(self, line: str) -> None:
        console.print(f"[red]ERROR[/red] {escape_markup(line)}")
