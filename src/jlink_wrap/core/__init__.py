"""Core / service layer — option catalog, coercion, assembly, escaping.

Rules
-----
* No ``print()`` calls.
* No subprocesses; filesystem access is limited to path existence checks.
* No imports from ``cli``, ``config`` or ``infra``.
"""

from jlink_wrap.core.command_builder import build_arguments
from jlink_wrap.core.escaping import HOST_QUOTING_STYLE, QuotingStyle, escape, format_command_line
from jlink_wrap.core.link_service import LinkService
from jlink_wrap.core.models import Endian, JlinkConfig, Launcher, ProcessResult
from jlink_wrap.core.options import OPTIONS, Option, option_for
from jlink_wrap.core.protocols import CommandRunner, Reporter

__all__: list[str] = [
    "CommandRunner",
    "Endian",
    "HOST_QUOTING_STYLE",
    "JlinkConfig",
    "Launcher",
    "LinkService",
    "OPTIONS",
    "Option",
    "ProcessResult",
    "QuotingStyle",
    "Reporter",
    "build_arguments",
    "escape",
    "format_command_line",
    "option_for",
]
