"""Subprocess-backed implementation of :class:`~jlink_wrap.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that starts a
process.  Launch failures (``OSError``) are caught here and re-raised
as :class:`~jlink_wrap.exceptions.ExecutionError`.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from jlink_wrap.core.escaping import format_command_line
from jlink_wrap.core.models import ProcessResult
from jlink_wrap.exceptions import ExecutableNotFoundError, ExecutionError


class SubprocessRunner:
    """Concrete :class:`CommandRunner` backed by :func:`subprocess.run`.

    Runs one process synchronously with no timeout, capturing both
    output streams as text.
    """

    def run(self, argv: Sequence[str]) -> ProcessResult:
        """Run *argv* and wait for it to finish.

        Raises
        ------
        ExecutableNotFoundError
            When ``argv[0]`` does not exist.
        ExecutionError
            For any other failure to start the process.
        """
        command = list(argv)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ExecutableNotFoundError(
                f"Executable not found: {command[0]}",
                command_line=format_command_line(command),
            ) from exc
        except OSError as exc:
            raise ExecutionError(
                f"Error while executing {command[0]}: {exc}",
                command_line=format_command_line(command),
            ) from exc

        return ProcessResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
