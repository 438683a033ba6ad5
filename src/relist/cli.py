#!/usr/bin/env python3
"""
Relist: Rebuild pasted numbered lists with clean, consistent numbering

Common usage:
  relist notes.txt
  pbpaste | relist
  relist --inplace todo.txt
  relist -o clean.txt pasted.txt

With no files (or '-'), text is read from stdin. An introductory first line such as
"Please see below:" is kept as is, original numbering like `3)`, `(3)` or `3.` is
replaced, and lines that don't look like items are kept verbatim and restart the
numbering.

Exit codes: 0 success, 1 empty or too short input, 2 text not recognized as a list
or file error, 3 warnings in --strict mode.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from relist.config import LOG_LEVELS, find_config_file, load_config, merge_cli_with_config
from relist.relist_api import RelistErrorKind, RelistResult, relist_files

log = logging.getLogger(__name__)

_EXIT_CODES: dict[RelistErrorKind, int] = {
    RelistErrorKind.empty_input: 1,
    RelistErrorKind.too_few_lines: 1,
    RelistErrorKind.pattern_mismatch: 2,
    RelistErrorKind.no_elements: 2,
}

EXIT_STRICT_WARNINGS = 3


@dataclass
class Options:
    """Command-line options for the relist tool."""

    files: list[str]
    output: str
    inplace: bool
    nobackup: bool
    strict: bool
    log_level: str
    version: bool


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which flags the user explicitly passed (for config merge precedence).
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="relist",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        default=[],
        help="Input files (use '-' or nothing for stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file (use '-' for stdout)",
    )
    parser.add_argument(
        "-i", "--inplace", action="store_true", help="Edit the file in place (ignores --output)"
    )
    parser.add_argument(
        "--nobackup",
        action="store_true",
        help="Do not make a backup of the original file when using --inplace",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with code {EXIT_STRICT_WARNINGS} if any line produced a warning",
    )
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        dest="log_level",
        default="warning",
        help="Log level for diagnostics on stderr (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="info",
        dest="log_level",
        help="Same as `--log-level info`",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # Re-parse with sentinel defaults to detect which flags were actually supplied,
    # rather than comparing against default values.
    _SENTINEL = object()
    sentinel_parser = argparse.ArgumentParser(add_help=False)
    sentinel_parser.add_argument("--nobackup", action="store_true", default=_SENTINEL)
    sentinel_parser.add_argument("--strict", action="store_true", default=_SENTINEL)
    sentinel_parser.add_argument("--log-level", dest="log_level", default=_SENTINEL)
    sentinel_parser.add_argument(
        "-v", "--verbose", action="store_const", const="info", dest="log_level", default=_SENTINEL
    )
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    explicit_flags: set[str] = set()
    for name in ("nobackup", "strict", "log_level"):
        if getattr(sentinel_opts, name, _SENTINEL) is not _SENTINEL:
            explicit_flags.add(name)

    return (
        Options(
            files=opts.files,
            output=opts.output,
            inplace=opts.inplace,
            nobackup=opts.nobackup,
            strict=opts.strict,
            log_level=opts.log_level,
            version=opts.version,
        ),
        explicit_flags,
    )


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _exit_code(results: list[RelistResult], strict: bool) -> int:
    code = 0
    for result in results:
        if result.error is not None:
            code = max(code, _EXIT_CODES[result.error.kind])
    if code == 0 and strict and any(result.warnings for result in results):
        log.error("Warnings reported in strict mode")
        return EXIT_STRICT_WARNINGS
    return code


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the relist CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("relist")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    _setup_logging(options.log_level)

    # Load and merge config file settings
    config_path = find_config_file(Path.cwd())
    if config_path:
        log.debug(f"Using config file {config_path}")
        config = load_config(config_path)
        merge_cli_with_config(options, config, explicit_flags)
        logging.getLogger().setLevel(options.log_level.upper())

    try:
        results = relist_files(
            files=options.files,
            output=options.output,
            inplace=options.inplace,
            nobackup=options.nobackup,
        )
    except ValueError as e:
        # Usage errors, like using --inplace with stdin.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Catch other potential file or processing errors.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return _exit_code(results, options.strict)


if __name__ == "__main__":
    sys.exit(main())
