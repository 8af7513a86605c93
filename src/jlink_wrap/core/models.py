"""Domain models for jlink-wrap.

All models are **frozen** dataclasses (or enums) — immutable value
objects.  They carry zero I/O and no dependencies on external packages.
:class:`Launcher` is the only model with behaviour: it validates itself
and renders the ``--launcher`` value.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

from jlink_wrap.exceptions import ConfigurationError

PathValue = str | os.PathLike[str]
"""Anything accepted where a filesystem path is configured."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Endian(enum.Enum):
    """Byte order of the generated image (``--endian``)."""

    LITTLE = "LITTLE"
    BIG = "BIG"

    @property
    def value_token(self) -> str:
        """Token passed to ``jlink`` — the lower-case member name."""
        return self.name.lower()


# ---------------------------------------------------------------------------
# Launcher
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Launcher:
    """A launcher command bound to a module and optional main class.

    Serialises to ``name=module`` or ``name=module/main_class``.
    """

    name: str | None
    module: str | None
    main_class: str | None = None
    """``None`` means "no main class"; an empty string is rejected."""

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` if the launcher is incomplete."""
        if not self.name:
            raise ConfigurationError(
                "Launcher name cannot be null or empty",
                option="--launcher",
            )
        if not self.module:
            raise ConfigurationError(
                "Launcher module cannot be null or empty",
                option="--launcher",
            )
        if self.main_class is not None and not self.main_class:
            raise ConfigurationError(
                "Launcher main class cannot be empty",
                option="--launcher",
                hint="Remove main_class entirely to launch the module's default entry point.",
            )

    def __str__(self) -> str:
        value = f"{self.name}={self.module}"
        if self.main_class:
            value += f"/{self.main_class}"
        return value


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class JlinkConfig:
    """Flat record of everything that can be requested from ``jlink``.

    Every field defaults to "not requested".  The record is consumed
    exactly once by :func:`~jlink_wrap.core.command_builder.build_arguments`.
    """

    output: PathValue | None = None
    """Target image directory (``--output``).  Mandatory at assembly time."""

    add_modules: tuple[str, ...] = ()
    bind_services: bool = False
    endian: Endian | None = None
    ignore_signing_information: bool = False
    limit_modules: tuple[str, ...] = ()
    module_paths: tuple[PathValue, ...] = ()
    no_header_files: bool = False
    no_man_pages: bool = False
    strip_debug: bool = False
    verbose: bool = False
    launchers: tuple[Launcher, ...] = ()

    # Execution switches, not forwarded to jlink.
    skip: bool = False
    dry_run: bool = False
    jdk_home: PathValue | None = None


# ---------------------------------------------------------------------------
# Process outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Exit status and captured streams of one finished subprocess."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
