"""
Line classification and renumbering for pasted lists.

Usage::

    from relist.sequence import classify, render

    classification = classify(lines)
    text = render(classification.leading_text, classification.lines)
"""

from relist.sequence.line_classifier import LEADING_TEXT_SIGMAS, classify
from relist.sequence.renderer import render
from relist.sequence.types import Classification, ClassifiedLine, Element, Logger, Unparsed

__all__ = [
    "LEADING_TEXT_SIGMAS",
    "Classification",
    "ClassifiedLine",
    "Element",
    "Logger",
    "Unparsed",
    "classify",
    "render",
]
