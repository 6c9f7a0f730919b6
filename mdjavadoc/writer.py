"""Reading and writing of source files."""

from __future__ import annotations

import difflib
from pathlib import Path

from .config import DEFAULT_ENCODING


def render_diff(path: Path, original: str, updated: str) -> str:
    """Return a unified diff between the original and converted text."""
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        updated.splitlines(keepends=True),
        fromfile=f"{path} (original)",
        tofile=f"{path} (converted)",
    )
    return "".join(diff)


class FileWriter:
    """Reads source files verbatim and writes converted content back."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def read(self, path: Path) -> str:
        # newline="" keeps \r\n sequences intact so untouched text round-trips.
        with path.open("r", encoding=self.encoding, newline="") as handle:
            return handle.read()

    def write(self, path: Path, content: str) -> None:
        with path.open("w", encoding=self.encoding, newline="") as handle:
            handle.write(content)
