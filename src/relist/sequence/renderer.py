"""
Rendering of classified lines into a renumbered list.

Items are numbered `1. `, `2. `, ... in order. An unparsed fragment is emitted as
is and restarts the numbering, so a list interrupted by a note becomes two lists:

    1. alpha
    NOTE
    1. beta
"""

from __future__ import annotations

from collections.abc import Sequence

from relist.sequence.types import ClassifiedLine, Element, Unparsed


def _drop_placeholder(lines: Sequence[ClassifiedLine]) -> Sequence[ClassifiedLine]:
    if lines and lines[0] == Element(""):
        return lines[1:]
    return lines


def render(leading_text: str, lines: Sequence[ClassifiedLine]) -> str | None:
    """
    Render `leading_text` (if any) followed by the renumbered list.

    Returns None if no lines are left once a suppressed first line is dropped.
    """
    lines = _drop_placeholder(lines)
    if not lines:
        return None

    output: list[str] = []
    counter = 0
    for line in lines:
        if isinstance(line, Unparsed):
            counter = 0
            output.append(line.original)
        else:
            counter += 1
            output.append(f"{counter}. {line.content}")

    result = "\n".join(output)
    if leading_text:
        result = leading_text + "\n" + result
    return result
