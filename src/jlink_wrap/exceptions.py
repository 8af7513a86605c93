"""Custom exception hierarchy for jlink-wrap.

All exceptions that cross layer boundaries must inherit from
:class:`JlinkWrapError`.  Raw ``OSError`` / ``subprocess`` failures
must never propagate beyond the infrastructure layer — they are caught
there and re-raised as a typed subclass defined here.

Hierarchy
---------
JlinkWrapError
├── ConfigurationError
├── ExecutionError
│   └── ExecutableNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class JlinkWrapError(Exception):
    """Base exception for all jlink-wrap errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(JlinkWrapError):
    """Raised when the configuration cannot produce a valid command line.

    Covers a missing mandatory option, a path that must exist but does
    not, an invalid launcher, and malformed configuration files.  Always
    raised before any subprocess is started.
    """

    def __init__(
        self,
        message: str,
        *,
        option: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.option: str | None = option
        """Flag or configuration key the error refers to, if known."""


# --- Execution -------------------------------------------------------------

class ExecutionError(JlinkWrapError):
    """Raised when ``jlink`` fails to launch or exits with a non-zero code."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        stderr: str = "",
        stdout: str = "",
        command_line: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.exit_code: int | None = exit_code
        self.stderr: str = stderr
        self.stdout: str = stdout
        self.command_line: str = command_line


class ExecutableNotFoundError(ExecutionError):
    """Raised when no ``jlink`` executable can be located."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(JlinkWrapError):
    """Raised when a required runtime dependency is not available."""
