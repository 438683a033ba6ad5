"""Types shared by the line classifier and the sequence renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union


class Logger(Protocol):
    """
    Anything that can report progress and anomalies. A `logging.Logger` works,
    and tests can pass a recorder to capture messages deterministically.
    """

    def info(self, msg: str, /) -> object: ...

    def warning(self, msg: str, /) -> object: ...

    def error(self, msg: str, /) -> object: ...


@dataclass(frozen=True)
class Element:
    """
    A recognized list item with its prefix and separator stripped.

    An `Element` with empty content in first position is a placeholder for a
    suppressed first line and is dropped when rendering.
    """

    content: str


@dataclass(frozen=True)
class Unparsed:
    """A line that could not be split into prefix and content, kept verbatim."""

    original: str


ClassifiedLine = Union[Element, Unparsed]


@dataclass
class Classification:
    """
    Output of the line classifier.

    `lines` has one entry per input line, in input order, or is empty when the
    input did not look like a list at all. `warnings` collects the non-fatal
    anomalies that were also sent to the logger.
    """

    leading_text: str = ""
    lines: list[ClassifiedLine] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return not self.lines
