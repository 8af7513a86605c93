"""Tests for argument escaping (core/escaping.py).

Both quoting conventions are exercised in every run — the style is an
explicit argument, not host state.
"""

from __future__ import annotations

import pytest

from jlink_wrap.core.escaping import (
    HOST_QUOTING_STYLE,
    QuotingStyle,
    escape,
    format_command_line,
    is_windows,
    quoting_style_for,
)


# ---------------------------------------------------------------------------
# escape: literal expectations
# ---------------------------------------------------------------------------

class TestEscapePosix:
    @pytest.mark.parametrize(
        ("arg", "expected"),
        [
            ("", ""),
            ("123", "123"),
            ("-DAppOption=text string", '"-DAppOption=text string"'),
            ("-D k=text string", '"-D k=text string"'),
            ('-XX:OnError="userdump.exe %p"', '"-XX:OnError=\\"userdump.exe %p\\""'),
        ],
    )
    def test_literal_outputs(self, arg: str, expected: str) -> None:
        assert escape(arg, QuotingStyle.POSIX) == expected

    def test_quote_without_space_is_not_wrapped(self) -> None:
        assert escape('a"b', QuotingStyle.POSIX) == 'a\\"b'


class TestEscapeWindows:
    @pytest.mark.parametrize(
        ("arg", "expected"),
        [
            ("", ""),
            ("123", "123"),
            ("-DAppOption=text string", '\\"-DAppOption=text string\\"'),
            ("-D k=text string", '\\"-D k=text string\\"'),
            (
                '-XX:OnError="userdump.exe %p"',
                '\\"-XX:OnError=\\\\\\"userdump.exe %p\\\\\\"\\"',
            ),
        ],
    )
    def test_literal_outputs(self, arg: str, expected: str) -> None:
        assert escape(arg, QuotingStyle.WINDOWS) == expected

    def test_quote_without_space_is_not_wrapped(self) -> None:
        assert escape('a"b', QuotingStyle.WINDOWS) == 'a\\\\\\"b'


# ---------------------------------------------------------------------------
# Style resolution
# ---------------------------------------------------------------------------

class TestIsWindows:
    @pytest.mark.parametrize("system", ["Windows", "CYGWIN_NT-10.0"])
    def test_windows_family(self, system: str) -> None:
        assert is_windows(system)

    @pytest.mark.parametrize("system", ["Darwin", "Linux", ""])
    def test_others(self, system: str) -> None:
        assert not is_windows(system)


class TestQuotingStyleFor:
    @pytest.mark.parametrize("system", ["Windows", "windows", "CYGWIN_NT-10.0"])
    def test_windows_family(self, system: str) -> None:
        assert quoting_style_for(system) is QuotingStyle.WINDOWS

    @pytest.mark.parametrize("system", ["Linux", "Darwin", "FreeBSD", ""])
    def test_posix_family(self, system: str) -> None:
        assert quoting_style_for(system) is QuotingStyle.POSIX

    def test_host_style_is_a_quoting_style(self) -> None:
        assert isinstance(HOST_QUOTING_STYLE, QuotingStyle)


# ---------------------------------------------------------------------------
# format_command_line
# ---------------------------------------------------------------------------

class TestFormatCommandLine:
    def test_joins_with_spaces_and_escapes_each_element(self) -> None:
        argv = ["/opt/jdk/bin/jlink", "--output", "/tmp/my image"]
        assert (
            format_command_line(argv, QuotingStyle.POSIX)
            == '/opt/jdk/bin/jlink --output "/tmp/my image"'
        )

    def test_empty_argv(self) -> None:
        assert format_command_line([], QuotingStyle.POSIX) == ""
