"""Catalog of the ``jlink`` options understood by jlink-wrap.

The catalog is closed: every recognised long-form flag has exactly one
:class:`Option` record, and every configuration field maps to exactly
one of them through :func:`option_for`.
"""

from __future__ import annotations

from dataclasses import dataclass

from jlink_wrap.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class Option:
    """A single recognised ``jlink`` flag."""

    id: str
    """Symbolic identifier (e.g. ``OUTPUT``)."""

    flag: str
    """Literal command-line token (e.g. ``--output``)."""

    def __str__(self) -> str:
        return self.flag


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

ADD_MODULES = Option("ADD_MODULES", "--add-modules")
BIND_SERVICES = Option("BIND_SERVICES", "--bind-services")
DISABLE_PLUGIN = Option("DISABLE_PLUGIN", "--disable-plugin")
ENDIAN = Option("ENDIAN", "--endian")
IGNORE_SIGNING_INFORMATION = Option("IGNORE_SIGNING_INFORMATION", "--ignore-signing-information")
LAUNCHER = Option("LAUNCHER", "--launcher")
LIMIT_MODULES = Option("LIMIT_MODULES", "--limit-modules")
MODULE_PATH = Option("MODULE_PATH", "--module-path")
NO_HEADER_FILES = Option("NO_HEADER_FILES", "--no-header-files")
NO_MAN_PAGES = Option("NO_MAN_PAGES", "--no-man-pages")
OUTPUT = Option("OUTPUT", "--output")
STRIP_DEBUG = Option("STRIP_DEBUG", "--strip-debug")
VERBOSE = Option("VERBOSE", "--verbose")

OPTIONS: tuple[Option, ...] = (
    ADD_MODULES,
    BIND_SERVICES,
    DISABLE_PLUGIN,
    ENDIAN,
    IGNORE_SIGNING_INFORMATION,
    LAUNCHER,
    LIMIT_MODULES,
    MODULE_PATH,
    NO_HEADER_FILES,
    NO_MAN_PAGES,
    OUTPUT,
    STRIP_DEBUG,
    VERBOSE,
)
"""Every recognised option, alphabetically by identifier."""


# ---------------------------------------------------------------------------
# Configuration field → option
# ---------------------------------------------------------------------------

# DISABLE_PLUGIN is catalogued but has no configuration field yet.
_FIELD_OPTIONS: dict[str, Option] = {
    "add_modules": ADD_MODULES,
    "bind_services": BIND_SERVICES,
    "endian": ENDIAN,
    "ignore_signing_information": IGNORE_SIGNING_INFORMATION,
    "launchers": LAUNCHER,
    "limit_modules": LIMIT_MODULES,
    "module_paths": MODULE_PATH,
    "no_header_files": NO_HEADER_FILES,
    "no_man_pages": NO_MAN_PAGES,
    "output": OUTPUT,
    "strip_debug": STRIP_DEBUG,
    "verbose": VERBOSE,
}


def option_for(field_name: str) -> Option:
    """Return the :class:`Option` bound to configuration field *field_name*.

    Raises
    ------
    ConfigurationError
        If *field_name* is not an option-bearing configuration field.
    """
    try:
        return _FIELD_OPTIONS[field_name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown option field {field_name!r}.",
            option=field_name,
        ) from None
