"""Line scanner splitting CUE sheet lines into field names and remainders."""

from collections.abc import Iterator, Sequence
from typing import NamedTuple

# ASCII whitespace that separates a field name from its value
WHITESPACE = " \t\n\r\f"


class ScannedLine(NamedTuple):
    """A non-blank line split into its field name and the text after it."""

    line_index: int
    field: str
    remainder: str


def split_lines(text: str) -> list[str]:
    """Split text into lines on ``\\n``, dropping one trailing ``\\r`` from each.

    Other characters :meth:`str.splitlines` treats as boundaries (``\\x85``,
    ``\\x0c``, U+2028 and so on) stay part of the line. A trailing newline
    does not produce an empty last line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_field(line: str) -> tuple[str, str] | None:
    """Split a line into its first word and the remainder.

    Args:
        line: Raw line text without line terminator

    Returns:
        ``(field, remainder)``, or None if the line is blank
    """
    stripped = line.lstrip(WHITESPACE)
    if not stripped:
        return None

    end = len(stripped)
    for i, char in enumerate(stripped):
        if char in WHITESPACE:
            end = i
            break

    return stripped[:end], stripped[end:].lstrip(" \t")


class LineScanner:
    """Forward cursor over pre-split lines that can be rewound with :meth:`seek`.

    Blank lines are skipped. Iterating the scanner advances it, so a loop
    that breaks out early leaves the cursor just past the last line seen.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self.lines = lines
        self.position = 0

    def __iter__(self) -> Iterator[ScannedLine]:
        return self

    def __next__(self) -> ScannedLine:
        entry = self.advance()
        if entry is None:
            raise StopIteration
        return entry

    def advance(self) -> ScannedLine | None:
        """Return the next non-blank line and move past it."""
        while self.position < len(self.lines):
            index = self.position
            self.position += 1

            parts = split_field(self.lines[index])
            if parts is not None:
                return ScannedLine(index, *parts)

        return None

    def peek(self) -> ScannedLine | None:
        """Return the next non-blank line without moving the cursor."""
        saved = self.position
        entry = self.advance()
        self.position = saved
        return entry

    def seek(self, line_index: int) -> None:
        """Move the cursor so the line at ``line_index`` is read next."""
        if not 0 <= line_index <= len(self.lines):
            raise IndexError(f"line index out of range: {line_index}")
        self.position = line_index

    def is_exhausted(self) -> bool:
        """Whether every line has been consumed."""
        return self.position >= len(self.lines)

    def source_line(self, line_index: int) -> str | None:
        """Raw text of a line, or None when the index is out of range."""
        if 0 <= line_index < len(self.lines):
            return self.lines[line_index]
        return None
