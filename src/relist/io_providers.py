"""
Where pasted text comes from and where the renumbered list goes.

An `InputProvider` returns one block of raw text and a `ResultPresenter` accepts
the final string. Both are single-shot coroutines so interactive front ends can
wait on the user without blocking; `show()` returns once the text is delivered.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Protocol, TextIO

from strif import atomic_output_file

PROMPT_LABEL = "Paste the original sequence text here (end with Ctrl-D):"


class InputProvider(Protocol):
    async def prompt(self, label: str) -> str: ...


class ResultPresenter(Protocol):
    async def show(self, text: str) -> None: ...


class StdinInputProvider:
    """
    Reads all of stdin. The label is shown on `prompt_stream` only when the input
    is a terminal, so piped input stays quiet.
    """

    def __init__(self, stream: TextIO | None = None, prompt_stream: TextIO | None = None):
        self.stream: TextIO = stream if stream is not None else sys.stdin
        self.prompt_stream: TextIO = prompt_stream if prompt_stream is not None else sys.stderr

    async def prompt(self, label: str) -> str:
        if self.stream.isatty():
            print(label, file=self.prompt_stream, flush=True)
        return await asyncio.to_thread(self.stream.read)


class FileInputProvider:
    def __init__(self, path: Path):
        self.path: Path = path

    async def prompt(self, label: str) -> str:
        return self.path.read_text(encoding="utf-8")


class StreamPresenter:
    """Writes the result followed by a newline to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream: TextIO = stream if stream is not None else sys.stdout

    async def show(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


class FilePresenter:
    """
    Writes the result to a file atomically. If `backup_suffix` is set and the file
    already exists, the previous version is kept as `<name><backup_suffix>`.
    """

    def __init__(self, path: Path, backup_suffix: str | None = None):
        self.path: Path = path
        self.backup_suffix: str | None = backup_suffix

    async def show(self, text: str) -> None:
        with atomic_output_file(
            self.path, make_parents=True, backup_suffix=self.backup_suffix
        ) as temp_path:
            Path(temp_path).write_text(text + "\n", encoding="utf-8")
