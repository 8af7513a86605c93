"""CLI application entry point and command routing for jlink-wrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~jlink_wrap.exceptions.JlinkWrapError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the config,
  core and infrastructure layers.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jlink_wrap.cli import exit_codes
from jlink_wrap.cli.console import console, escape_markup
from jlink_wrap.exceptions import ConfigurationError, ExecutionError, JlinkWrapError
from jlink_wrap.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``jlink-wrap build``   — build the runtime image from configuration
    * ``jlink-wrap doctor``  — environment diagnostics
    * ``jlink-wrap --version``
    """
    parser = argparse.ArgumentParser(
        prog="jlink-wrap",
        description="Build a Java runtime image with jlink from a TOML configuration.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        choices=("build", "doctor"),
        help="'build' to run jlink, or 'doctor' to run diagnostics.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: ./jlink.toml, else ./pyproject.toml).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and print the command line without running jlink.",
    )
    parser.add_argument(
        "--jdk-home",
        default=None,
        help="JDK installation to take jlink from (overrides JAVA_HOME).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_build(args: argparse.Namespace) -> int:
    """Load the configuration and run a single jlink invocation."""
    from dataclasses import replace

    from jlink_wrap.cli.console import ConsoleReporter
    from jlink_wrap.config import dry_run_from_env, find_config, load_config
    from jlink_wrap.core.link_service import LinkService
    from jlink_wrap.infra.jlink_locator import require_jlink
    from jlink_wrap.infra.process_runner import SubprocessRunner

    config_path: Path = args.config if args.config is not None else find_config(Path.cwd())
    config = load_config(config_path)
    if args.jdk_home:
        config = replace(config, jdk_home=args.jdk_home)

    service = LinkService(SubprocessRunner(), require_jlink)
    service.link(
        config,
        ConsoleReporter(),
        dry_run=args.dry_run or dry_run_from_env(),
    )
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from jlink_wrap.cli.doctor import run_doctor

    return run_doctor(jdk_home=args.jdk_home)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the jlink-wrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.target == "doctor":
        return _handle_doctor(args)

    return _handle_build(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _render_error(exc: JlinkWrapError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
    if isinstance(exc, ExecutionError) and exc.stderr and exc.stderr.strip() not in str(exc):
        console.print(escape_markup(exc.stderr.strip()))
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ConfigurationError as exc:
        _render_error(exc)
        sys.exit(exit_codes.CONFIGURATION_ERROR)
    except JlinkWrapError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
