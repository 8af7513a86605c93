"""Regression tests for the optional Rich dependency.

Bootstrap commands and builds must keep working when Rich is missing;
output then degrades to plain stderr lines with markup stripped.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from jlink_wrap.cli import exit_codes
from jlink_wrap.cli.app import main
from jlink_wrap.cli.console import ConsoleReporter, console, escape_markup, get_rich_console
from jlink_wrap.core.models import ProcessResult
from jlink_wrap.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)


def test_rich_console_raises_environment_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_console_strips_markup_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("[bold red]Error:[/bold red] boom")
    assert capsys.readouterr().err == "Error: boom\n"


def test_escape_markup_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert escape_markup("[info] done") == "[info] done"


def test_reporter_keeps_brackets_with_rich(capsys: pytest.CaptureFixture[str]) -> None:
    pytest.importorskip("rich")

    ConsoleReporter().info("[jlink] linking 3 modules")
    assert "[jlink] linking 3 modules" in capsys.readouterr().err


def test_build_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.delenv("JAVA_HOME", raising=False)
    monkeypatch.delenv("JLINK_DRY_RUN", raising=False)
    (tmp_path / "jlink.toml").write_text('output = "/tmp/img"\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with patch("jlink_wrap.infra.jlink_locator.shutil.which", return_value="/usr/bin/jlink"):
        with patch("jlink_wrap.infra.process_runner.SubprocessRunner.run") as mock_run:
            mock_run.return_value = ProcessResult(exit_code=0, stdout="done\n", stderr="")
            assert main(["build"]) == exit_codes.SUCCESS

    err = capsys.readouterr().err
    assert "  --output /tmp/img" in err
    assert "done" in err
