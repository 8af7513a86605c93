"""Value coercion — typed configuration values to command-line tokens.

Each function takes one :class:`~jlink_wrap.core.options.Option` and one
configuration value and returns the tokens that value contributes:
nothing, the flag alone, or ``(flag, value)`` pairs.

"Empty means absent": ``None``, empty strings, whitespace-only strings
and empty sequences all produce no tokens.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from jlink_wrap.core.models import Endian, Launcher, PathValue
from jlink_wrap.core.options import Option
from jlink_wrap.exceptions import ConfigurationError

Tokens = tuple[str, ...]


def is_blank(value: str | None) -> bool:
    """Return ``True`` for ``None`` and whitespace-only strings."""
    return value is None or not value.strip()


def path_text(value: PathValue | None) -> str | None:
    """Return *value* as a string, or ``None`` when it is unset or blank."""
    if value is None:
        return None
    text = os.fspath(value)
    return None if is_blank(text) else text


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def coerce_flag(option: Option, value: bool) -> Tokens:
    """``(flag,)`` when *value* is true, otherwise nothing."""
    return (option.flag,) if value else ()


def coerce_enum(option: Option, value: Endian | None) -> Tokens:
    """``(flag, lower-case member name)`` when *value* is set."""
    if value is None:
        return ()
    return (option.flag, value.value_token)


def coerce_path(
    option: Option,
    value: PathValue | None,
    *,
    check_existence: bool,
) -> Tokens:
    """``(flag, absolute path)`` when *value* is set.

    The path is made absolute against the current working directory.

    Raises
    ------
    ConfigurationError
        If *check_existence* is set and the path does not exist.
    """
    text = path_text(value)
    if text is None:
        return ()

    path = Path(text).absolute()
    if check_existence and not path.exists():
        raise ConfigurationError(
            f"File or directory {path} does not exist ({option.flag})",
            option=option.flag,
        )
    return (option.flag, str(path))


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def coerce_joined(option: Option, values: Sequence[str] | None) -> Tokens:
    """``(flag, "a,b,c")`` when *values* is non-empty."""
    if not values:
        return ()
    return (option.flag, ",".join(values))


def coerce_paths(
    option: Option,
    values: Sequence[PathValue] | None,
    *,
    check_existence: bool,
) -> Tokens:
    """One ``(flag, path)`` pair per element of *values*, in order."""
    tokens: list[str] = []
    for value in values or ():
        tokens.extend(coerce_path(option, value, check_existence=check_existence))
    return tuple(tokens)


def coerce_launchers(option: Option, launchers: Sequence[Launcher] | None) -> Tokens:
    """One ``(flag, name=module[/main_class])`` pair per launcher, in order.

    Raises
    ------
    ConfigurationError
        If any launcher fails :meth:`Launcher.validate`.
    """
    tokens: list[str] = []
    for launcher in launchers or ():
        launcher.validate()
        tokens.extend((option.flag, str(launcher)))
    return tuple(tokens)
