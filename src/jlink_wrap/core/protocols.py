"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from jlink_wrap.core.models import ProcessResult


class CommandRunner(Protocol):
    """Contract for the subprocess execution backend.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, argv: Sequence[str]) -> ProcessResult:
        """Run *argv* to completion and return its exit code and output.

        ``argv[0]`` is the executable.  A non-zero exit code is *not* an
        error at this level — it is returned for the caller to map.

        Raises
        ------
        ExecutionError
            When the process cannot be started at all.
        """
        ...  # pragma: no cover


class Reporter(Protocol):
    """Line-oriented log sink supplied by the caller.

    The CLI layer backs this with the Rich console; tests usually pass a
    :class:`~unittest.mock.MagicMock`.
    """

    def info(self, line: str) -> None: ...  # pragma: no cover

    def warn(self, line: str) -> None: ...  # pragma: no cover

    def error(self, line: str) -> None: ...  # pragma: no cover
