from relist.relist_api import (
    MIN_LINES,
    RelistError,
    RelistErrorKind,
    RelistResult,
    classify_and_render,
    relist_file,
    relist_files,
    relist_interactive,
    split_lines,
)
from relist.sequence import Classification, Element, Unparsed, classify, render

__all__ = [
    "MIN_LINES",
    "Classification",
    "Element",
    "RelistError",
    "RelistErrorKind",
    "RelistResult",
    "Unparsed",
    "classify",
    "classify_and_render",
    "relist_file",
    "relist_files",
    "relist_interactive",
    "render",
    "split_lines",
]
