"""Infrastructure: ``jlink`` executable discovery.

Lookup order
------------
1. An explicit JDK home (``jdk_home`` in the configuration or
   ``--jdk-home`` on the command line).
2. The ``JAVA_HOME`` environment variable.
3. ``jlink`` on the system ``PATH`` via :func:`shutil.which`.

Rules
-----
* No subprocess — existence checks only.
* No ``print()`` — warnings are collected on the returned status, or
  handed to the caller's warning sink by :func:`require_jlink`.
"""

from __future__ import annotations

import os
import platform
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from jlink_wrap.core.escaping import is_windows
from jlink_wrap.core.models import PathValue
from jlink_wrap.exceptions import ExecutableNotFoundError

EXECUTABLE: str = "jlink"
JAVA_HOME_ENV: str = "JAVA_HOME"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class JlinkStatus:
    """Result of a ``jlink`` discovery probe.

    Attributes
    ----------
    found : bool
        Whether an executable was located.
    path : Path | None
        Path to the ``jlink`` binary, or ``None``.
    source : str
        Where it was found: ``"jdk_home"``, ``"JAVA_HOME"``, ``"PATH"``
        or ``"none"``.
    warnings : tuple[str, ...]
        Candidates that were inspected and rejected, in lookup order.
    """

    found: bool
    path: Path | None
    source: str
    warnings: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def executable_name() -> str:
    """Return the ``jlink`` file name for the host OS."""
    if is_windows(platform.system()):
        return f"{EXECUTABLE}.exe"
    return EXECUTABLE


def jlink_in_home(jdk_home: PathValue) -> Path:
    """Return the expected ``jlink`` location inside *jdk_home*."""
    return Path(jdk_home) / "bin" / executable_name()


def locate_jlink(jdk_home: PathValue | None = None) -> JlinkStatus:
    """Probe for a ``jlink`` executable.

    Returns a :class:`JlinkStatus` whether or not ``jlink`` was found —
    the caller decides whether to abort.
    """
    warnings: list[str] = []

    homes: list[tuple[str, str]] = []
    if jdk_home is not None and os.fspath(jdk_home).strip():
        homes.append(("jdk_home", os.fspath(jdk_home)))
    java_home = os.environ.get(JAVA_HOME_ENV, "").strip()
    if java_home:
        homes.append((JAVA_HOME_ENV, java_home))

    for source, home in homes:
        candidate = jlink_in_home(home)
        if candidate.is_file():
            return JlinkStatus(found=True, path=candidate, source=source, warnings=tuple(warnings))
        warnings.append(f"File {candidate} does not exist")

    on_path = shutil.which(EXECUTABLE)
    if on_path is not None:
        return JlinkStatus(found=True, path=Path(on_path), source="PATH", warnings=tuple(warnings))

    warnings.append(f"{EXECUTABLE} is not on PATH")
    return JlinkStatus(found=False, path=None, source="none", warnings=tuple(warnings))


def require_jlink(
    jdk_home: PathValue | None = None,
    warn: Callable[[str], None] | None = None,
) -> Path:
    """Locate ``jlink`` or raise :class:`ExecutableNotFoundError`.

    When ``jlink`` is found, every rejected candidate is passed to *warn*.
    """
    status = locate_jlink(jdk_home)
    if not status.found or status.path is None:
        hint_lines = list(status.warnings)
        hint_lines.append(
            f"Set {JAVA_HOME_ENV} (or jdk_home) to a JDK 9+ installation, "
            f"or put {EXECUTABLE} on PATH."
        )
        raise ExecutableNotFoundError(
            f"Failed to find {EXECUTABLE}",
            hint="\n".join(hint_lines),
        )
    if warn is not None:
        for warning in status.warnings:
            warn(warning)
    return status.path
