"""Tests for value coercion (core/coercion.py).

Coverage:
* Booleans emit the flag alone iff true.
* Enumerations, scalars, paths and lists follow "empty means absent".
* Repeated paths and launchers emit one pair per element, in order.
* Existence checks raise ``ConfigurationError`` naming path and flag.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from jlink_wrap.core import options
from jlink_wrap.core.coercion import (
    coerce_enum,
    coerce_flag,
    coerce_joined,
    coerce_launchers,
    coerce_path,
    coerce_paths,
    is_blank,
    path_text,
)
from jlink_wrap.core.models import Endian, Launcher
from jlink_wrap.exceptions import ConfigurationError

BOOLEAN_OPTIONS = [
    options.BIND_SERVICES,
    options.IGNORE_SIGNING_INFORMATION,
    options.NO_HEADER_FILES,
    options.NO_MAN_PAGES,
    options.STRIP_DEBUG,
    options.VERBOSE,
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestBlankHelpers:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank(self, value: str | None) -> None:
        assert is_blank(value)

    def test_not_blank(self) -> None:
        assert not is_blank(" x ")

    def test_path_text_accepts_path_objects(self) -> None:
        assert path_text(Path("/tmp/img")) == str(Path("/tmp/img"))

    def test_path_text_blank_is_none(self) -> None:
        assert path_text("  ") is None
        assert path_text(None) is None


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

class TestCoerceFlag:
    @pytest.mark.parametrize("option", BOOLEAN_OPTIONS)
    def test_true_emits_single_flag(self, option: options.Option) -> None:
        assert coerce_flag(option, True) == (option.flag,)

    @pytest.mark.parametrize("option", BOOLEAN_OPTIONS)
    def test_false_emits_nothing(self, option: options.Option) -> None:
        assert coerce_flag(option, False) == ()


class TestCoerceEnum:
    def test_little(self) -> None:
        assert coerce_enum(options.ENDIAN, Endian.LITTLE) == ("--endian", "little")

    def test_big(self) -> None:
        assert coerce_enum(options.ENDIAN, Endian.BIG) == ("--endian", "big")

    def test_unset(self) -> None:
        assert coerce_enum(options.ENDIAN, None) == ()


class TestCoercePath:
    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        assert coerce_path(options.OUTPUT, str(tmp_path), check_existence=False) == (
            "--output",
            str(tmp_path),
        )

    def test_relative_path_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        flag, value = coerce_path(options.OUTPUT, "image", check_existence=False)
        assert flag == "--output"
        assert Path(value) == tmp_path.absolute() / "image"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_is_absent(self, value: str | None) -> None:
        assert coerce_path(options.MODULE_PATH, value, check_existence=True) == ()

    def test_missing_path_without_check_is_emitted(self, tmp_path: Path) -> None:
        missing = tmp_path / "not-there"
        assert coerce_path(options.OUTPUT, missing, check_existence=False) == (
            "--output",
            str(missing),
        )

    def test_missing_path_with_check_raises(self, tmp_path: Path) -> None:
        missing = tmp_path / "not-there"
        with pytest.raises(ConfigurationError, match="does not exist") as exc_info:
            coerce_path(options.MODULE_PATH, missing, check_existence=True)
        assert str(missing) in str(exc_info.value)
        assert "(--module-path)" in str(exc_info.value)
        assert exc_info.value.option == "--module-path"


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

class TestCoerceJoined:
    def test_joined_with_commas(self) -> None:
        assert coerce_joined(options.ADD_MODULES, ["java.base", "java.sql"]) == (
            "--add-modules",
            "java.base,java.sql",
        )

    def test_single_value(self) -> None:
        assert coerce_joined(options.LIMIT_MODULES, ("java.base",)) == (
            "--limit-modules",
            "java.base",
        )

    @pytest.mark.parametrize("values", [None, [], ()])
    def test_empty_is_absent(self, values: list[str] | None) -> None:
        assert coerce_joined(options.ADD_MODULES, values) == ()


class TestCoercePaths:
    def test_one_pair_per_element_in_order(self, tmp_path: Path) -> None:
        first = tmp_path / "jmods"
        second = tmp_path / "libs"
        first.mkdir()
        second.mkdir()

        tokens = coerce_paths(options.MODULE_PATH, [first, second], check_existence=True)
        assert tokens == (
            "--module-path",
            str(first),
            "--module-path",
            str(second),
        )

    def test_each_element_checked(self, tmp_path: Path) -> None:
        present = tmp_path / "jmods"
        present.mkdir()
        with pytest.raises(ConfigurationError, match="missing"):
            coerce_paths(
                options.MODULE_PATH,
                [present, tmp_path / "missing"],
                check_existence=True,
            )

    def test_empty_list(self) -> None:
        assert coerce_paths(options.MODULE_PATH, [], check_existence=True) == ()
        assert coerce_paths(options.MODULE_PATH, None, check_existence=True) == ()


class TestCoerceLaunchers:
    def test_one_pair_per_launcher_in_order(self) -> None:
        tokens = coerce_launchers(
            options.LAUNCHER,
            [Launcher("a", "m1"), Launcher("b", "m2", "pkg.Main")],
        )
        assert tokens == ("--launcher", "a=m1", "--launcher", "b=m2/pkg.Main")

    def test_invalid_launcher_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Launcher module"):
            coerce_launchers(options.LAUNCHER, [Launcher("a", "m1"), Launcher("b", "")])

    def test_empty(self) -> None:
        assert coerce_launchers(options.LAUNCHER, None) == ()
