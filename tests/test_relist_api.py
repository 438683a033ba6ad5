"""Tests for the text pipeline and the file API."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import pytest

from relist.relist_api import (
    RelistErrorKind,
    classify_and_render,
    relist_file,
    relist_files,
    split_lines,
)
from relist.sequence.line_classifier import classify


class TestSplitLines:
    def test_newlines(self) -> None:
        assert split_lines("  x  \n\n y \r\n") == ["x", "y"]

    def test_wide_whitespace_runs(self) -> None:
        assert split_lines("1. a    2. b\t\t\t\t3. c\n4. d") == ["1. a", "2. b", "3. c", "4. d"]

    def test_narrow_whitespace_is_not_a_delimiter(self) -> None:
        assert split_lines("1. a   b") == ["1. a   b"]


class TestClassifyAndRender:
    def test_round_trip_with_leading_text(self) -> None:
        result = classify_and_render("Please see below:\n1. foo\n2. bar\n3. baz")
        assert result.ok
        assert result.leading_text == "Please see below:"
        assert result.text == "Please see below:\n1. foo\n2. bar\n3. baz"

    def test_renumbers_out_of_order_prefixes(self) -> None:
        result = classify_and_render("7) apple\n3) pear\n(9) plum\n1. fig")
        assert result.text == "1. apple\n2. pear\n3. plum\n4. fig"

    def test_inline_paste(self) -> None:
        result = classify_and_render("Todo:    1. wash    2. dry    3. fold")
        assert result.text == "Todo:\n1. wash\n2. dry\n3. fold"

    def test_unparsed_line_preserved_and_numbering_restarts(self) -> None:
        result = classify_and_render("Intro\n1. alpha\nNOTE\n2. beta")
        assert result.ok
        assert result.text == "Intro\n1. alpha\nNOTE\n1. beta"
        assert "Failed to analyze line 2." in result.warnings

    @pytest.mark.parametrize(
        ("raw", "pieces", "suppressed"),
        [
            # Leading text found by distance
            ("Please see below:\n1. foo\n2. bar\n3. baz", ["Please see below:", "foo", "bar", "baz"], 0),
            # Leading text by fallback, one unparsed line
            ("Intro\n1. alpha\nNOTE\n2. beta\n3. gamma", ["Intro", "alpha", "NOTE", "beta", "gamma"], 0),
            # A run of unparsed lines
            ("Heading\n1) one\nxx\nyy\n2) two\n3) three", ["Heading", "one", "xx", "yy", "two", "three"], 0),
            # First line reduced to an empty placeholder and dropped
            ("Things:\n- milk\n- eggs\n- bread", ["milk", "eggs", "bread"], 1),
            # First line is a regular item
            ("1. apple\n2. pear\n3. plum\n4. fig", ["apple", "pear", "plum", "fig"], 0),
        ],
    )
    def test_every_line_rendered_once(self, raw: str, pieces: list[str], suppressed: int) -> None:
        lines = split_lines(raw)
        classification = classify(lines)
        assert len(classification.lines) == len(lines)

        result = classify_and_render(raw)
        assert result.ok
        rendered = result.text.split("\n")
        assert len(rendered) == len(lines) - suppressed
        for piece in pieces:
            matches = [line for line in rendered if line.split(". ", 1)[-1] == piece]
            assert len(matches) == 1, piece

    def test_very_long_numeric_prefix(self) -> None:
        result = classify_and_render("Intro\n1. a\n2. b\n" + "9" * 5000 + ". c")
        assert result.ok
        assert result.text == "Intro\n1. a\n2. b\n3. c"

    @pytest.mark.parametrize("raw", ["", "   \n\t  "])
    def test_empty_input(self, raw: str) -> None:
        result = classify_and_render(raw)
        assert not result.ok
        assert result.error is not None
        assert result.error.kind == RelistErrorKind.empty_input
        assert result.text == ""

    def test_too_few_lines(self) -> None:
        result = classify_and_render("a\nb\nc")
        assert result.error is not None
        assert result.error.kind == RelistErrorKind.too_few_lines
        assert result.error.message == "Too few lines (<=3) to analyze."

    def test_pattern_mismatch(self) -> None:
        result = classify_and_render("1. a\n2. b\n3. c\nEND")
        assert result.error is not None
        assert result.error.kind == RelistErrorKind.pattern_mismatch
        assert result.warnings == ["Failed to match the list pattern on the last line."]

    def test_errors_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="relist.relist_api"):
            classify_and_render("a\nb\nc")
        assert "Too few lines (<=3) to analyze." in caplog.text


EXPECTED = "Please see below:\n1. foo\n2. bar\n3. baz\n"
UNORDERED = "Please see below:\n3. foo\n1. bar\n2. baz\n"


class TestRelistFile:
    def test_output_file(self, tmp_path: Path) -> None:
        src = tmp_path / "in.txt"
        src.write_text(UNORDERED)
        out = tmp_path / "sub" / "out.txt"
        result = relist_file(src, out)
        assert result.ok
        assert out.read_text() == EXPECTED
        assert src.read_text() == UNORDERED

    def test_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = tmp_path / "in.txt"
        src.write_text(UNORDERED)
        relist_file(src, "-")
        assert capsys.readouterr().out == EXPECTED

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(UNORDERED))
        result = relist_file(None, None)
        assert result.ok
        captured = capsys.readouterr()
        assert captured.out == EXPECTED
        assert captured.err == ""

    def test_inplace_with_backup(self, tmp_path: Path) -> None:
        src = tmp_path / "list.txt"
        src.write_text(UNORDERED)
        relist_file(src, None, inplace=True)
        assert src.read_text() == EXPECTED
        assert (tmp_path / "list.txt.orig").read_text() == UNORDERED

    def test_inplace_nobackup(self, tmp_path: Path) -> None:
        src = tmp_path / "list.txt"
        src.write_text(UNORDERED)
        relist_file(src, None, inplace=True, nobackup=True)
        assert src.read_text() == EXPECTED
        assert not (tmp_path / "list.txt.orig").exists()

    def test_inplace_stdin_rejected(self) -> None:
        with pytest.raises(ValueError):
            relist_file("-", None, inplace=True)

    def test_nothing_written_on_error(self, tmp_path: Path) -> None:
        src = tmp_path / "short.txt"
        src.write_text("a\nb\n")
        out = tmp_path / "out.txt"
        result = relist_file(src, out)
        assert result.error is not None
        assert result.error.kind == RelistErrorKind.too_few_lines
        assert not out.exists()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            relist_file(tmp_path / "missing.txt", None)


class TestRelistFiles:
    def test_multiple_inplace(self, tmp_path: Path) -> None:
        paths = [tmp_path / "a.txt", tmp_path / "b.txt"]
        for p in paths:
            p.write_text(UNORDERED)
        results = relist_files([str(p) for p in paths], None, inplace=True, nobackup=True)
        assert [r.ok for r in results] == [True, True]
        assert all(p.read_text() == EXPECTED for p in paths)

    def test_multiple_to_one_output_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            relist_files(["a.txt", "b.txt"], tmp_path / "out.txt")

    def test_no_files_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(UNORDERED))
        results = relist_files([], None)
        assert len(results) == 1
        assert capsys.readouterr().out == EXPECTED
