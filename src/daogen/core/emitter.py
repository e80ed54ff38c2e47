"""
Indentation-aware line writer.

The emitter owns the current indent depth for the file being written and
guarantees that at most one output file is open at a time.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from daogen.core.errors import FilesystemFailureError
from daogen.logging import get_logger

logger = get_logger("daogen.emitter")

OPEN_BRACE = "{"
CLOSE_BRACE = "}"


def pad(text: str, width: int) -> str:
    """Left-pad text with ``width`` spaces; a width of zero or less is a no-op."""
    if width <= 0:
        return text
    return " " * width + text


class Emitter:
    """
    Writes lines with brace-matched indentation.

    A line starting with ``}`` dedents before it is written and a line ending
    with ``{`` indents the lines after it. Unbalanced input skews the
    indentation of every following line; it is not corrected.

    Example:
        emitter = Emitter(spacing=2)
        with emitter.open("out/User.java"):
            emitter.write_line("public class User {")
            emitter.write_line("private int id;")
            emitter.write_line("}")
    """

    def __init__(self, spacing: int = 2, stream: TextIO | None = None) -> None:
        """
        Initialize the emitter.

        Args:
            spacing: Spaces per indent level; 0 disables padding
            stream: Fallback text stream used while no file is open
        """
        self.spacing = spacing
        self.depth = 0
        self._stream = stream
        self._handle: TextIO | None = None
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        """Path of the currently open file, if any."""
        return self._path

    @property
    def is_open(self) -> bool:
        """Whether an output file is currently open."""
        return self._handle is not None

    @contextmanager
    def open(self, path: str | Path) -> Iterator[Emitter]:
        """
        Open an output file for the duration of a ``with`` block.

        Any file that is still open is closed first. Parent directories are
        created as needed and the indent depth restarts at zero.

        Raises:
            FilesystemFailureError: If the directory or file cannot be created
        """
        self.close()

        file_path = Path(path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            handle = file_path.open("w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise FilesystemFailureError(str(file_path), e.strerror or str(e)) from e

        self._handle = handle
        self._path = file_path
        self.depth = 0
        logger.debug("Opened output file", path=str(file_path))

        try:
            yield self
        finally:
            if self._handle is handle:
                self.close()

    def close(self) -> None:
        """Close the current output file. Safe to call when nothing is open."""
        if self._handle is None:
            return
        try:
            self._handle.close()
        finally:
            logger.debug("Closed output file", path=str(self._path))
            self._handle = None
            self._path = None

    def write_line(self, text: str) -> str:
        """
        Write one line, adjusting the indent depth around braces.

        Returns:
            The line as written, including its padding
        """
        if text.startswith(CLOSE_BRACE):
            self.depth -= 1

        line = pad(text, self.depth * self.spacing)
        self._write(line + "\n")

        if text.endswith(OPEN_BRACE):
            self.depth += 1

        return line

    def write_lines(self, lines: list[str]) -> list[str]:
        """Write several lines in order."""
        return [self.write_line(line) for line in lines]

    def write_blank_line(self) -> None:
        """Write an empty line; the indent depth is unchanged."""
        self._write("\n")

    def _write(self, data: str) -> None:
        target = self._handle or self._stream
        if target is None:
            raise FilesystemFailureError("<none>", "no output file is open")
        try:
            target.write(data)
        except OSError as e:
            raise FilesystemFailureError(str(self._path), e.strerror or str(e)) from e
