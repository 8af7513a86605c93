"""Declarative configuration loading.

Reads a :class:`~jlink_wrap.core.models.JlinkConfig` from TOML, either
the ``[tool.jlink]`` table of a ``pyproject.toml`` or a standalone
``jlink.toml`` (top level, or its ``[jlink]`` table)::

    [tool.jlink]
    output = "target/image"
    module_paths = ["target/jmods"]
    add_modules = ["com.example.app"]
    strip_debug = true
    endian = "little"

    [[tool.jlink.launchers]]
    name = "app"
    module = "com.example.app"
    main_class = "com.example.app.Main"

Rules
-----
* Unknown keys and wrongly-typed values raise
  :class:`~jlink_wrap.exceptions.ConfigurationError`.
* Relative paths are resolved against the directory of the file.
* Presence rules ("empty means absent") are *not* applied here; that is
  the command builder's job.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jlink_wrap.core.models import Endian, JlinkConfig, Launcher
from jlink_wrap.exceptions import ConfigurationError

PYPROJECT: str = "pyproject.toml"
STANDALONE: str = "jlink.toml"
DRY_RUN_ENV: str = "JLINK_DRY_RUN"

_BOOL_KEYS: frozenset[str] = frozenset({
    "skip",
    "dry_run",
    "bind_services",
    "ignore_signing_information",
    "no_header_files",
    "no_man_pages",
    "strip_debug",
    "verbose",
})
_STRING_LIST_KEYS: frozenset[str] = frozenset({"add_modules", "limit_modules"})
_PATH_KEYS: frozenset[str] = frozenset({"output", "jdk_home"})
_KNOWN_KEYS: frozenset[str] = (
    _BOOL_KEYS | _STRING_LIST_KEYS | _PATH_KEYS | {"module_paths", "endian", "launchers"}
)
_LAUNCHER_KEYS: frozenset[str] = frozenset({"name", "module", "main_class"})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def find_config(directory: Path) -> Path:
    """Return the configuration file to use in *directory*.

    ``jlink.toml`` wins over ``pyproject.toml``.

    Raises
    ------
    ConfigurationError
        If neither file exists.
    """
    for name in (STANDALONE, PYPROJECT):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise ConfigurationError(
        f"No {STANDALONE} or {PYPROJECT} found in {directory}",
        hint="Pass --config PATH or create a jlink.toml.",
    )


def load_config(path: Path) -> JlinkConfig:
    """Parse the jlink configuration stored in *path*.

    Raises
    ------
    ConfigurationError
        If the file is missing or unreadable, is not valid TOML, has no
        jlink table, or contains unknown keys or wrongly-typed values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file {path} does not exist") from None
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc

    table = _select_table(data, path)
    return parse_table(table, base_dir=path.parent.absolute())


def parse_table(table: Mapping[str, Any], *, base_dir: Path) -> JlinkConfig:
    """Convert a raw TOML table into a :class:`JlinkConfig`."""
    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration key(s): {', '.join(unknown)}",
            option=unknown[0],
            hint=f"Known keys: {', '.join(sorted(_KNOWN_KEYS))}",
        )

    values: dict[str, Any] = {}
    for key in _BOOL_KEYS & table.keys():
        values[key] = _expect_bool(table, key)
    for key in _STRING_LIST_KEYS & table.keys():
        values[key] = tuple(_expect_string_list(table, key))
    for key in _PATH_KEYS & table.keys():
        values[key] = _resolve_path(_expect_string(table, key), base_dir)
    if "module_paths" in table:
        values["module_paths"] = tuple(
            _resolve_path(item, base_dir)
            for item in _expect_string_list(table, "module_paths")
        )
    if "endian" in table:
        values["endian"] = _parse_endian(table["endian"])
    if "launchers" in table:
        values["launchers"] = tuple(_parse_launchers(table["launchers"]))

    return JlinkConfig(**values)


def dry_run_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``JLINK_DRY_RUN`` is set to ``true`` (any case)."""
    env = os.environ if environ is None else environ
    return env.get(DRY_RUN_ENV, "false").strip().lower() == "true"


# ---------------------------------------------------------------------------
# Table selection
# ---------------------------------------------------------------------------

def _select_table(data: Mapping[str, Any], path: Path) -> Mapping[str, Any]:
    if path.name == PYPROJECT:
        tool = data.get("tool", {})
        if not isinstance(tool, Mapping):
            raise ConfigurationError(f"'tool' in {path} must be a table")
        table = tool.get("jlink")
        if table is None:
            raise ConfigurationError(
                f"{path} has no [tool.jlink] table",
                hint="Add a [tool.jlink] table or use a standalone jlink.toml.",
            )
    else:
        table = data.get("jlink", data)

    if not isinstance(table, Mapping):
        raise ConfigurationError(f"The jlink configuration in {path} must be a table")
    return table


# ---------------------------------------------------------------------------
# Typed accessors
# ---------------------------------------------------------------------------

def _expect_bool(table: Mapping[str, Any], key: str) -> bool:
    value = table[key]
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"'{key}' must be true or false, got {value!r}",
            option=key,
        )
    return value


def _expect_string(table: Mapping[str, Any], key: str) -> str:
    value = table[key]
    if not isinstance(value, str):
        raise ConfigurationError(f"'{key}' must be a string, got {value!r}", option=key)
    return value


def _expect_string_list(table: Mapping[str, Any], key: str) -> list[str]:
    value = table[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(
            f"'{key}' must be an array of strings, got {value!r}",
            option=key,
        )
    return value


def _resolve_path(value: str, base_dir: Path) -> str:
    """Anchor a relative path at *base_dir*; blank values stay blank."""
    if not value.strip():
        return value
    path = Path(value)
    if path.is_absolute():
        return value
    return str(base_dir / path)


def _parse_endian(value: Any) -> Endian:
    if isinstance(value, str):
        try:
            return Endian[value.strip().upper()]
        except KeyError:
            pass
    choices = ", ".join(member.value_token for member in Endian)
    raise ConfigurationError(
        f"'endian' must be one of {choices}, got {value!r}",
        option="endian",
    )


def _parse_launchers(value: Any) -> list[Launcher]:
    if not isinstance(value, list):
        raise ConfigurationError(
            "'launchers' must be an array of tables",
            option="launchers",
        )

    launchers: list[Launcher] = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise ConfigurationError(
                f"launchers[{index}] must be a table, got {item!r}",
                option="launchers",
            )
        unknown = sorted(set(item) - _LAUNCHER_KEYS)
        if unknown:
            raise ConfigurationError(
                f"launchers[{index}] has unknown key(s): {', '.join(unknown)}",
                option="launchers",
            )
        for key in _LAUNCHER_KEYS & item.keys():
            if not isinstance(item[key], str):
                raise ConfigurationError(
                    f"launchers[{index}].{key} must be a string, got {item[key]!r}",
                    option="launchers",
                )
        launchers.append(
            Launcher(
                name=item.get("name"),
                module=item.get("module"),
                main_class=item.get("main_class"),
            )
        )
    return launchers
