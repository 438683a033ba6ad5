"""
Pattern matchers for list item lines.

A list item line is read as `prefix + splitter + content`:

- The splitter is a period (ASCII or ideographic), a colon, or whitespace, followed
  by optional whitespace. The first splitter on a line ends the prefix.
- The prefix is an optional opening bracket, one or more digits, and an optional
  closing bracket, e.g. `3`, `(3)`, `（3）`, `3)`.
- The symbol class is a fixed set of punctuation used to estimate how
  punctuation-heavy a line is.

Matchers return small dataclasses rather than raw indices so callers never have to
do index arithmetic on match objects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SPLITTER_PATTERN: re.Pattern[str] = re.compile(r"[。:\.\s]\s*")

PREFIX_PATTERN: re.Pattern[str] = re.compile(r"[\(（]?([0-9]+)[）\)]?")

SYMBOL_PATTERN: re.Pattern[str] = re.compile(r"[\.。，！…（）~“”：；、《》\*\&]")


@dataclass(frozen=True)
class SplitMatch:
    """
    A line split at its first splitter.

    `content` starts one character past the start of the splitter and is trimmed,
    so `"1.2 foo"` splits into prefix `"1"` and content `"2 foo"`.
    """

    prefix: str
    content: str


@dataclass(frozen=True)
class PrefixMatch:
    """A numbering prefix such as `(12)`; `digits` holds just the number, as text."""

    text: str
    digits: str


def find_splitter(line: str) -> SplitMatch | None:
    """Split `line` at its first splitter, or return None if it has none."""
    match = SPLITTER_PATTERN.search(line)
    if not match:
        return None
    start = match.start()
    return SplitMatch(prefix=line[:start], content=line[start + 1 :].strip())


def has_splitter(line: str) -> bool:
    return SPLITTER_PATTERN.search(line) is not None


def find_prefix(text: str) -> PrefixMatch | None:
    """
    Find a numbering prefix anywhere in `text`. This is a search, not an anchored
    match, so `"Step 2"` still counts as having a prefix.
    """
    match = PREFIX_PATTERN.search(text)
    if not match:
        return None
    return PrefixMatch(text=match.group(0), digits=match.group(1))


def count_symbols(line: str) -> int:
    """Count punctuation characters from the symbol class."""
    return len(SYMBOL_PATTERN.findall(line))


def extract_content(line: str) -> str:
    """Content after the first splitter, trimmed, or `""` if there is no splitter."""
    split = find_splitter(line)
    return split.content if split else ""
