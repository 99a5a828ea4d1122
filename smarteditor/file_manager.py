"""Loading and saving of line-based files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


@dataclass
class FileManager:
    """Tracks the current file and whether it has unsaved changes."""

    current_file: str = ""
    is_modified: bool = False

    def load_file(self, filepath: str | os.PathLike) -> list[str]:
        """Read a file as lines; an empty file gives one empty line.

        Raises OSError when the file cannot be opened.
        """
        with open(filepath, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            content = handle.read()
        lines = content.split("\n")
        if content.endswith("\n"):
            lines.pop()
        if not lines:
            lines = [""]
        self.current_file = os.fspath(filepath)
        self.is_modified = False
        return lines

    def save_file(self, filepath: str | os.PathLike, lines: Iterable[str]) -> None:
        """Write lines joined by newlines, with no newline after the last.

        Raises OSError when the file cannot be written.
        """
        with open(filepath, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            handle.write("\n".join(lines))
        self.current_file = os.fspath(filepath)
        self.is_modified = False

    def save_as_file(self, filepath: str | os.PathLike, lines: Iterable[str]) -> None:
        """Save under a new name, which becomes the current file."""
        self.save_file(filepath, lines)

    def file_extension(self, filepath: str) -> str:
        """The text from the last dot onwards, or an empty string."""
        dot = filepath.rfind(".")
        return "" if dot == -1 else filepath[dot:]

    def text(self) -> str:
        """Text held by the manager itself; it keeps none, so this is empty."""
        return ""