"""Command assembly — a :class:`JlinkConfig` to a ``jlink`` argument vector.

The vector is assembled in one fixed order, so the same configuration
always produces the same command line.  The executable itself is *not*
part of the result; the caller prepends it.

Guarantees
----------
* Either the full vector is returned or :class:`ConfigurationError`
  is raised — never a partial vector.
* ``--output`` is mandatory but is not existence-checked (``jlink``
  creates it); every ``--module-path`` entry must exist.
* Each emitted option is reported to the optional line sink as
  ``"flag value"`` or ``"flag"``.
"""

from __future__ import annotations

from collections.abc import Callable

from jlink_wrap.core.coercion import (
    Tokens,
    coerce_enum,
    coerce_flag,
    coerce_joined,
    coerce_launchers,
    coerce_path,
    coerce_paths,
    path_text,
)
from jlink_wrap.core.models import JlinkConfig
from jlink_wrap.core.options import option_for
from jlink_wrap.exceptions import ConfigurationError

LineSink = Callable[[str], None]


def build_arguments(
    config: JlinkConfig,
    *,
    sink: LineSink | None = None,
) -> tuple[str, ...]:
    """Assemble the ``jlink`` argument vector for *config*.

    Parameters
    ----------
    config:
        The configuration to translate.
    sink:
        Optional callable receiving one line per emitted option.

    Raises
    ------
    ConfigurationError
        If ``output`` is unset or blank, a module path does not exist,
        or a launcher is invalid.
    """
    steps: tuple[Callable[[], Tokens], ...] = (
        lambda: coerce_flag(option_for("bind_services"), config.bind_services),
        lambda: coerce_enum(option_for("endian"), config.endian),
        lambda: coerce_flag(option_for("ignore_signing_information"), config.ignore_signing_information),
        lambda: coerce_flag(option_for("no_header_files"), config.no_header_files),
        lambda: coerce_flag(option_for("no_man_pages"), config.no_man_pages),
        lambda: _mandatory_output(config),
        lambda: coerce_flag(option_for("strip_debug"), config.strip_debug),
        lambda: coerce_flag(option_for("verbose"), config.verbose),
        lambda: coerce_joined(option_for("add_modules"), config.add_modules),
        lambda: coerce_joined(option_for("limit_modules"), config.limit_modules),
        lambda: coerce_paths(option_for("module_paths"), config.module_paths, check_existence=True),
        lambda: coerce_launchers(option_for("launchers"), config.launchers),
    )

    argv: list[str] = []
    for step in steps:
        tokens = step()
        if sink is not None:
            for line in _report_lines(tokens):
                sink(line)
        argv.extend(tokens)
    return tuple(argv)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _mandatory_output(config: JlinkConfig) -> Tokens:
    """Tokens for ``--output``; raises when it is unset or blank."""
    output = option_for("output")
    if path_text(config.output) is None:
        raise ConfigurationError(
            f'Mandatory parameter "{output.flag}" cannot be null or empty',
            option=output.flag,
            hint="Set 'output' to the directory the runtime image should be written to.",
        )
    return coerce_path(output, config.output, check_existence=False)


def _report_lines(tokens: Tokens) -> list[str]:
    """Group *tokens* into ``"flag"`` / ``"flag value"`` log lines."""
    if len(tokens) == 1:
        return [tokens[0]]
    return [f"{tokens[i]} {tokens[i + 1]}" for i in range(0, len(tokens), 2)]
