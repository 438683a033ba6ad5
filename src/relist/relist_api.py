"""
Public API for renumbering pasted lists, as text or as files.

Pipeline: raw text -> `split_lines` -> `classify` -> `render`. Inputs that can't
be analyzed come back as a `RelistResult` with `error` set rather than raising.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from relist.io_providers import (
    PROMPT_LABEL,
    FileInputProvider,
    FilePresenter,
    InputProvider,
    ResultPresenter,
    StdinInputProvider,
    StreamPresenter,
)
from relist.sequence.line_classifier import classify
from relist.sequence.renderer import render
from relist.sequence.types import Logger

log = logging.getLogger(__name__)

MIN_LINES = 4
"""Inputs with fewer non-empty lines than this are not analyzed."""

# Items pasted inline are often separated by wide runs of spaces instead of newlines.
_LINE_DELIMITER: re.Pattern[str] = re.compile(r"\n|\s{4,}")

BACKUP_SUFFIX = ".orig"


class RelistErrorKind(str, Enum):
    """Reasons a pasted text could not be turned into a list."""

    empty_input = "empty_input"
    too_few_lines = "too_few_lines"
    pattern_mismatch = "pattern_mismatch"
    no_elements = "no_elements"


_ERROR_MESSAGES: dict[RelistErrorKind, str] = {
    RelistErrorKind.empty_input: "Input is empty.",
    RelistErrorKind.too_few_lines: f"Too few lines (<={MIN_LINES - 1}) to analyze.",
    RelistErrorKind.pattern_mismatch: "Last line does not look like a list item.",
    RelistErrorKind.no_elements: "Analyze failed, might be caused by uncommon text patterns.",
}


@dataclass(frozen=True)
class RelistError:
    kind: RelistErrorKind
    message: str

    @classmethod
    def of(cls, kind: RelistErrorKind) -> RelistError:
        return cls(kind=kind, message=_ERROR_MESSAGES[kind])


@dataclass
class RelistResult:
    """
    Outcome of renumbering one pasted text.

    Exactly one of `text` and `error` is meaningful: `error` is None on success.
    Warnings are collected on both paths.
    """

    text: str = ""
    leading_text: str = ""
    error: RelistError | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


def split_lines(raw_text: str) -> list[str]:
    """Split on newlines or wide whitespace runs, trimming and dropping empty lines."""
    lines = (line.strip() for line in _LINE_DELIMITER.split(raw_text))
    return [line for line in lines if line]


def classify_and_render(raw_text: str, logger: Logger = log) -> RelistResult:
    """
    Turn pasted text into a cleanly renumbered list.

    Failures are returned in `RelistResult.error` (and logged), never raised.
    """

    def fail(kind: RelistErrorKind, warnings: list[str] | None = None) -> RelistResult:
        error = RelistError.of(kind)
        logger.error(error.message)
        return RelistResult(error=error, warnings=warnings or [])

    text = raw_text.strip()
    if not text:
        return fail(RelistErrorKind.empty_input)

    lines = split_lines(text)
    if len(lines) < MIN_LINES:
        return fail(RelistErrorKind.too_few_lines)

    classification = classify(lines, logger=logger)
    if classification.aborted:
        return fail(RelistErrorKind.pattern_mismatch, classification.warnings)

    rendered = render(classification.leading_text, classification.lines)
    if rendered is None:
        return fail(RelistErrorKind.no_elements, classification.warnings)

    return RelistResult(
        text=rendered,
        leading_text=classification.leading_text,
        warnings=classification.warnings,
    )


async def relist_interactive(
    provider: InputProvider,
    presenter: ResultPresenter,
    logger: Logger = log,
    label: str = PROMPT_LABEL,
) -> RelistResult:
    """
    Prompt for pasted text, renumber it, and show the result. Nothing is shown when
    the text could not be analyzed.
    """
    raw_text = await provider.prompt(label)
    result = classify_and_render(raw_text, logger=logger)
    if result.ok:
        await presenter.show(result.text)
    return result


def relist_file(
    path: str | Path | None,
    output: str | Path | None,
    inplace: bool = False,
    nobackup: bool = False,
    logger: Logger = log,
) -> RelistResult:
    """
    Renumber the list in a file, or stdin if `path` is None or `-`.

    Writes to `output` (stdout if None or `-`), or back to `path` when `inplace`
    is set, keeping a `.orig` backup unless `nobackup` is set.

    Raises:
        ValueError: if `inplace` is used with stdin.
    """
    read_stdin = path is None or str(path) == "-"
    if inplace and read_stdin:
        raise ValueError("Cannot use --inplace with stdin")

    provider: InputProvider
    if read_stdin:
        provider = StdinInputProvider()
    else:
        provider = FileInputProvider(Path(path))  # pyright: ignore[reportArgumentType]

    presenter: ResultPresenter
    if inplace:
        presenter = FilePresenter(
            Path(path),  # pyright: ignore[reportArgumentType]
            backup_suffix=None if nobackup else BACKUP_SUFFIX,
        )
    elif output is None or str(output) == "-":
        presenter = StreamPresenter()
    else:
        presenter = FilePresenter(Path(output))

    return asyncio.run(relist_interactive(provider, presenter, logger=logger))


def relist_files(
    files: list[str],
    output: str | Path | None,
    inplace: bool = False,
    nobackup: bool = False,
    logger: Logger = log,
) -> list[RelistResult]:
    """
    Renumber each file in turn. With no files, read stdin.

    Raises:
        ValueError: if more than one input would be written to a single output file.
    """
    if not files:
        files = ["-"]
    if len(files) > 1 and not inplace and output is not None and str(output) != "-":
        raise ValueError("Cannot write multiple inputs to one output file, use --inplace")

    results: list[RelistResult] = []
    for file in files:
        if len(files) > 1:
            logger.info(f"Processing {file}")
        results.append(
            relist_file(file, output, inplace=inplace, nobackup=nobackup, logger=logger)
        )
    return results
