"""Tests for pi.prompt.formats -- per-shell escape templates."""

from __future__ import annotations

import dataclasses
import re
import warnings

import pytest

from pi.prompt.formats import (
    ANSI_PATTERN,
    BASH_FORMATS,
    PLAIN_FORMATS,
    ZSH_FORMATS,
    Shell,
    get_formats,
)


class TestShellFromName:
    """Mapping shell names to dialects."""

    def test_known_names(self) -> None:
        assert Shell.from_name("zsh") is Shell.ZSH
        assert Shell.from_name("bash") is Shell.BASH
        assert Shell.from_name("plain") is Shell.PLAIN

    def test_path_and_case(self) -> None:
        assert Shell.from_name("/usr/bin/ZSH") is Shell.ZSH
        assert Shell.from_name("/bin/bash\n") is Shell.BASH

    def test_unknown_falls_back_to_plain(self) -> None:
        assert Shell.from_name("fish") is Shell.PLAIN
        assert Shell.from_name("") is Shell.PLAIN
        assert Shell.from_name(None) is Shell.PLAIN


class TestGetFormats:
    """Each dialect owns one complete template set."""

    def test_by_enum(self) -> None:
        assert get_formats(Shell.ZSH) is ZSH_FORMATS
        assert get_formats(Shell.BASH) is BASH_FORMATS
        assert get_formats(Shell.PLAIN) is PLAIN_FORMATS

    def test_by_name(self) -> None:
        assert get_formats("bash") is BASH_FORMATS
        assert get_formats("powershell") is PLAIN_FORMATS

    def test_formats_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            PLAIN_FORMATS.single = "%s"  # type: ignore[misc]


class TestPlainTemplates:
    """Plain templates carry no wrapper markers."""

    def test_single(self) -> None:
        assert PLAIN_FORMATS.single % ("31", "x") == "\x1b[31mx\x1b[0m"

    def test_full(self) -> None:
        assert PLAIN_FORMATS.full % ("44", "32", "x") == "\x1b[44m\x1b[32mx\x1b[0m"

    def test_transparent(self) -> None:
        assert (
            PLAIN_FORMATS.transparent % ("31", "x")
            == "\x1b[31;49m\x1b[7mx\x1b[m\x1b[0m"
        )

    def test_cursor_and_line(self) -> None:
        assert PLAIN_FORMATS.linechange % (2, "F") == "\x1b[2F"
        assert PLAIN_FORMATS.left % 5 == "\x1b[5C"
        assert PLAIN_FORMATS.right % 5 == "\x1b[5D"

    def test_title_reset_clear(self) -> None:
        assert PLAIN_FORMATS.title % "t" == "\x1b]0;t\x07"
        assert PLAIN_FORMATS.creset == "\x1b[0m"
        assert PLAIN_FORMATS.clear_eol == "\x1b[K"

    def test_no_markers(self) -> None:
        assert PLAIN_FORMATS.zero_width_markers == ()


class TestZshTemplates:
    """zsh wraps escape runs in ``%{`` ... ``%}``."""

    def test_single(self) -> None:
        assert ZSH_FORMATS.single % ("31", "x") == "%{\x1b[31m%}x%{\x1b[0m%}"

    def test_full(self) -> None:
        assert (
            ZSH_FORMATS.full % ("44", "32", "x")
            == "%{\x1b[44m\x1b[32m%}x%{\x1b[0m%}"
        )

    def test_transparent(self) -> None:
        assert (
            ZSH_FORMATS.transparent % ("31", "x")
            == "%{\x1b[31;49m\x1b[7m%}x%{\x1b[m\x1b[0m%}"
        )

    def test_cursor_title_and_literals(self) -> None:
        assert ZSH_FORMATS.linechange % (3, "B") == "%{\x1b[3B%}"
        assert ZSH_FORMATS.left % 1 == "%{\x1b[1C%}"
        assert ZSH_FORMATS.right % 1 == "%{\x1b[1D%}"
        assert ZSH_FORMATS.title % "t" == "%{\x1b]0;t\x07%}"
        assert ZSH_FORMATS.creset == "%{\x1b[0m%}"
        assert ZSH_FORMATS.clear_eol == "%{\x1b[K%}"

    def test_percent_in_text_is_kept(self) -> None:
        assert ZSH_FORMATS.single % ("31", "100%") == "%{\x1b[31m%}100%%{\x1b[0m%}"


class TestBashTemplates:
    """bash wraps escape runs in ``\\[`` ... ``\\]``."""

    def test_single(self) -> None:
        assert BASH_FORMATS.single % ("31", "x") == "\\[\x1b[31m\\]x\\[\x1b[0m\\]"

    def test_full(self) -> None:
        assert (
            BASH_FORMATS.full % ("44", "32", "x")
            == "\\[\x1b[44m\x1b[32m\\]x\\[\x1b[0m\\]"
        )

    def test_transparent(self) -> None:
        assert (
            BASH_FORMATS.transparent % ("31", "x")
            == "\\[\x1b[31;49m\x1b[7m\\]x\\[\x1b[m\x1b[0m\\]"
        )

    def test_cursor_title_and_literals(self) -> None:
        assert BASH_FORMATS.linechange % (3, "F") == "\\[\x1b[3F\\]"
        assert BASH_FORMATS.left % 1000 == "\\[\x1b[1000C\\]"
        assert BASH_FORMATS.right % 2 == "\\[\x1b[2D\\]"
        assert BASH_FORMATS.title % "t" == "\\[\x1b]0;t\x07\\]"
        assert BASH_FORMATS.creset == "\\[\x1b[0m\\]"
        assert BASH_FORMATS.clear_eol == "\\[\x1b[K\\]"

    def test_markers(self) -> None:
        assert BASH_FORMATS.zero_width_markers == ("\\[", "\\]")


class TestAnsiPattern:
    """The shared escape pattern."""

    def test_compiles_without_warnings(self) -> None:
        re.purge()
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            re.compile(ANSI_PATTERN)

    def test_bracket_introducers_still_match(self) -> None:
        pattern = re.compile(ANSI_PATTERN)
        assert pattern.fullmatch("\x1b[31m")
        assert pattern.fullmatch("\x1b]0;t\x07")
        assert pattern.fullmatch("\x1b(B")
