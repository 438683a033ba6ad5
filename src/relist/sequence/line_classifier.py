"""
Line classification for pasted lists.

Given the lines of a pasted list, decide:

- whether the first line is leading prose (e.g. "Please see below:") rather than
  a list item,
- for every other line, whether it is a list item or a fragment that can't be
  parsed,
- the clean content of each list item, with its original numbering removed.

ANCHOR LINE
-----------
The last line is assumed to be a real list item. If it has no splitter at all,
the input is not treated as a list and classification stops with an empty result.

LEADING TEXT
------------
Every line but the first is measured as a point `(length, symbol_count)`. The
first line is leading text when its distance from the mean point exceeds
`LEADING_TEXT_SIGMAS` times the spread of the other lines (see
`relist.sequence.line_stats.SpreadSummary`). A first line with no splitter is
also leading text, since it can't be a list item anyway.

EXAMPLE
-------
Input lines:
    Please see below:
    1. foo
    2) bar
    (3) baz

Result:
    leading_text = "Please see below:"
    lines = [Element(""), Element("foo"), Element("bar"), Element("baz")]
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from relist.sequence.line_stats import LineStats, summarize
from relist.sequence.patterns import extract_content, find_prefix, find_splitter, has_splitter
from relist.sequence.types import Classification, ClassifiedLine, Element, Logger, Unparsed

log = logging.getLogger(__name__)

LEADING_TEXT_SIGMAS = 6
"""How many deviations from the list's mean the first line must be to count as prose."""


def classify(lines: Sequence[str], logger: Logger = log) -> Classification:
    """
    Classify trimmed, non-empty `lines` (at least two of them).

    Non-fatal anomalies are reported through `logger` and also collected in
    `Classification.warnings`. Returns an empty classification when the last line
    does not look like a list item.
    """
    if len(lines) < 2:
        raise ValueError(f"Need at least 2 lines to classify, got {len(lines)}")

    warnings: list[str] = []

    def warn(msg: str) -> None:
        warnings.append(msg)
        logger.warning(msg)

    anchor = lines[-1]
    if not has_splitter(anchor):
        warn("Failed to match the list pattern on the last line.")
        return Classification(warnings=warnings)
    if find_prefix(anchor) is None:
        warn("Failed to match line id.")

    classified: list[ClassifiedLine] = [Element("")] * len(lines)
    stats: list[LineStats] = []

    # The first line is left alone until the rest of the list has been measured.
    for i in range(1, len(lines)):
        line = lines[i]
        stats.append(LineStats.of(line))

        split = find_splitter(line)
        if split is None or not split.content:
            warn(f"Failed to analyze line {i}.")
            classified[i] = Unparsed(line)
            continue

        if find_prefix(split.prefix) is None:
            warn(f"Prefix match failed for line {i}.")
        classified[i] = Element(split.content)

    spread = summarize(stats)
    first_line = lines[0]
    first_line_dist = spread.distance_of(LineStats.of(first_line))

    leading_text = ""
    if first_line_dist > LEADING_TEXT_SIGMAS * spread.dist_std_deviation:
        logger.info("First line classified as leading text.")
        leading_text = first_line
    elif not has_splitter(first_line):
        warn("First line classified as element, but failed to parse.")
        leading_text = first_line
    else:
        # Unlike the other lines, empty content is not checked here.
        classified[0] = Element(extract_content(first_line))

    return Classification(leading_text=leading_text, lines=classified, warnings=warnings)
