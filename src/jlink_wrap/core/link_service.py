"""Core link service — orchestrates one ``jlink`` invocation.

This service assembles the command line, hands it to a
:class:`~jlink_wrap.core.protocols.CommandRunner` injected at
construction time, and maps the outcome to success or
:class:`~jlink_wrap.exceptions.ExecutionError`.

Flow
----
1. ``skip`` short-circuits everything.
2. The ``jlink`` executable is resolved.
3. The argument vector is assembled (and each option reported).
4. In dry-run mode the process is not started.
5. Otherwise the process runs once; exit code 0 is success.

Guarantees
----------
* No ``print()`` — everything goes through the injected reporter.
* Only :class:`~jlink_wrap.exceptions.JlinkWrapError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from jlink_wrap.core.command_builder import build_arguments
from jlink_wrap.core.escaping import format_command_line
from jlink_wrap.core.models import JlinkConfig, PathValue, ProcessResult
from jlink_wrap.core.protocols import CommandRunner, Reporter
from jlink_wrap.exceptions import ExecutionError, JlinkWrapError

EXECUTABLE: str = "jlink"

WarningSink = Callable[[str], None]
ExecutableResolver = Callable[[PathValue | None, WarningSink], Path]


class LinkService:
    """Stateless service that drives a single ``jlink`` run.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    resolve_executable:
        Callable returning the ``jlink`` path for an optional JDK home.
        Rejected candidates are passed to its warning sink.
    """

    def __init__(
        self,
        runner: CommandRunner,
        resolve_executable: ExecutableResolver,
    ) -> None:
        self._runner: CommandRunner = runner
        self._resolve_executable: ExecutableResolver = resolve_executable

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def link(
        self,
        config: JlinkConfig,
        reporter: Reporter,
        *,
        dry_run: bool = False,
    ) -> ProcessResult | None:
        """Build the runtime image described by *config*.

        Returns
        -------
        ProcessResult | None
            The finished process, or ``None`` when execution was skipped
            or suppressed by dry-run mode.

        Raises
        ------
        ConfigurationError
            When the configuration cannot produce a valid command line.
        ExecutionError
            When ``jlink`` cannot be found, cannot start, or exits
            non-zero.
        """
        if config.skip:
            reporter.info("Skipping execution")
            return None

        executable = self._resolve_executable(config.jdk_home, reporter.warn)
        reporter.info(f"Using: {executable}")

        reporter.info(f"{EXECUTABLE} options:")
        argv = build_arguments(config, sink=lambda line: reporter.info(f"  {line}"))
        command = (str(executable), *argv)

        if dry_run or config.dry_run:
            reporter.warn(f"Dry-run mode, not executing {EXECUTABLE}")
            return None

        result = self._run(command)
        self._relay(result, reporter, command)
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run(self, command: tuple[str, ...]) -> ProcessResult:
        try:
            return self._runner.run(command)
        except JlinkWrapError:
            # Already one of ours; propagate unchanged.
            raise
        except Exception as exc:
            raise ExecutionError(
                f"Error while executing {EXECUTABLE}: {exc}",
                command_line=format_command_line(command),
            ) from exc

    @staticmethod
    def _relay(
        result: ProcessResult,
        reporter: Reporter,
        command: tuple[str, ...],
    ) -> None:
        """Forward captured stdout and raise on a non-zero exit code."""
        output_lines = result.stdout.strip().splitlines()

        if result.succeeded:
            for line in output_lines:
                reporter.info(line)
            return

        for line in output_lines:
            reporter.error(line)

        message = f"Exit code: {result.exit_code}"
        error_output = result.stderr.strip()
        if error_output:
            message += f" - {error_output}"

        command_line = format_command_line(command)
        raise ExecutionError(
            message,
            exit_code=result.exit_code,
            stderr=result.stderr,
            stdout=result.stdout,
            command_line=command_line,
            hint=f"Command line was: {command_line}",
        )
