"""Platform-sensitive quoting of single command-line arguments.

:func:`escape` is pure: the quoting convention is passed in as a
:class:`QuotingStyle` rather than read from the host, so both
conventions can be exercised in the same process.
:data:`HOST_QUOTING_STYLE` holds the convention of the running OS.

Rules
-----
* Every ``"`` becomes ``\\"`` (POSIX) or ``\\\\\\"`` (Windows).
* If the result contains a space it is wrapped in ``"`` (POSIX) or
  ``\\"`` (Windows).
* Anything else passes through unchanged.
"""

from __future__ import annotations

import enum
import platform
from collections.abc import Iterable


class QuotingStyle(enum.Enum):
    """Quoting convention of a command-line interpreter."""

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def quote_replacement(self) -> str:
        if self is QuotingStyle.WINDOWS:
            return '\\\\\\"'
        return '\\"'

    @property
    def space_wrapper(self) -> str:
        if self is QuotingStyle.WINDOWS:
            return '\\"'
        return '"'


def is_windows(system_name: str) -> bool:
    """Return ``True`` for Windows-family OS names (``Windows``, ``CYGWIN_NT-...``).

    ``Darwin`` contains ``win`` but is macOS.
    """
    name = system_name.lower()
    return "win" in name and "darwin" not in name


def quoting_style_for(system_name: str) -> QuotingStyle:
    """Map an OS name (as reported by :func:`platform.system`) to a style."""
    if is_windows(system_name):
        return QuotingStyle.WINDOWS
    return QuotingStyle.POSIX


HOST_QUOTING_STYLE: QuotingStyle = quoting_style_for(platform.system())
"""Quoting convention of the host, resolved once at import."""


def escape(arg: str, style: QuotingStyle = HOST_QUOTING_STYLE) -> str:
    """Return *arg* escaped for inclusion in a shell-interpreted command line."""
    escaped = arg.replace('"', style.quote_replacement)
    if " " in escaped:
        escaped = f"{style.space_wrapper}{escaped}{style.space_wrapper}"
    return escaped


def format_command_line(
    argv: Iterable[str],
    style: QuotingStyle = HOST_QUOTING_STYLE,
) -> str:
    """Join *argv* into a single diagnostic string, escaping each element."""
    return " ".join(escape(arg, style) for arg in argv)
