"""Plain-text canvas format.

Layout::

    <width> <height>
    <color>,<code> <color>,<code> ... (width pairs)
    ... (height rows)

``color`` is a palette index and ``code`` the numeric character code
(a space is 32). Pairs are separated by one space with none after the
last pair of a row.

Decoding is tolerant in the same places a scanf-style reader is:
whitespace (including newlines) may precede any number, anything after
the header numbers or after the last pair of a row is ignored up to the
end of that line, and out-of-range values are coerced rather than
rejected. A missing number or comma is a structural error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from term_paint.core.canvas import Canvas
from term_paint.core.cell import Cell
from term_paint.core.constants import (
    DEFAULT_COLOR,
    EMPTY_CHAR,
    MAX_CANVAS_HEIGHT,
    MAX_CANVAS_WIDTH,
    MAX_CHAR_CODE,
    MIN_CANVAS_SIZE,
    is_valid_color,
)
from term_paint.errors import FormatError, HeaderError

# C isspace() in the "C" locale
_WHITESPACE = frozenset(" \t\n\r\v\f")
_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ParsedGrid:
    """A fully decoded file, not yet applied to any live canvas."""
    canvas: Canvas
    coerced: int = 0


class _Scanner:
    """Cursor over the decoded text with scanf-like primitives."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_whitespace(self) -> None:
        text, pos = self.text, self.pos
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
        self.pos = pos

    def read_int(self) -> int | None:
        """Skip leading whitespace and read a signed decimal integer."""
        self.skip_whitespace()
        match = _INT_RE.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return int(match.group())

    def expect(self, char: str) -> bool:
        """Consume char if it is next, without skipping whitespace."""
        if self.text.startswith(char, self.pos):
            self.pos += len(char)
            return True
        return False

    def skip_line(self) -> None:
        """Discard everything up to and including the next newline."""
        newline = self.text.find("\n", self.pos)
        self.pos = len(self.text) if newline == -1 else newline + 1

    def error(self, message: str, kind: type[FormatError] = FormatError) -> FormatError:
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        return kind(message, line, column)


def encode(canvas: Canvas) -> str:
    """Serialize a canvas to the text format."""
    lines = [f"{canvas.width} {canvas.height}"]
    for row in canvas.rows():
        lines.append(" ".join(f"{cell.color},{cell.code}" for cell in row))
    return "\n".join(lines) + "\n"


def parse_header(scanner: _Scanner) -> tuple[int, int]:
    width = scanner.read_int()
    height = scanner.read_int() if width is not None else None
    if width is None or height is None:
        raise scanner.error("expected '<width> <height>' header", HeaderError)
    if not (MIN_CANVAS_SIZE <= width <= MAX_CANVAS_WIDTH
            and MIN_CANVAS_SIZE <= height <= MAX_CANVAS_HEIGHT):
        raise scanner.error(
            f"canvas size {width}x{height} outside "
            f"{MIN_CANVAS_SIZE}-{MAX_CANVAS_WIDTH} x {MIN_CANVAS_SIZE}-{MAX_CANVAS_HEIGHT}",
            HeaderError,
        )
    scanner.skip_line()
    return width, height


def decode(text: str) -> ParsedGrid:
    """
    Decode the text format into a new canvas of the file's size.

    Raises:
        FormatError: If the header or any pair is structurally malformed.
            Nothing is returned in that case; the caller's canvas is
            never involved.
    """
    scanner = _Scanner(text)
    width, height = parse_header(scanner)

    cells: list[Cell] = []
    coerced = 0
    for y in range(height):
        for x in range(width):
            color = scanner.read_int()
            if color is None:
                raise scanner.error(f"expected color for cell ({x},{y})")
            if not scanner.expect(","):
                raise scanner.error(f"expected ',' in cell ({x},{y})")
            code = scanner.read_int()
            if code is None:
                raise scanner.error(f"expected character code for cell ({x},{y})")

            if not is_valid_color(color):
                color = DEFAULT_COLOR
                coerced += 1
            if 0 <= code <= MAX_CHAR_CODE:
                char = chr(code)
            else:
                char = EMPTY_CHAR
                coerced += 1
            cells.append(Cell(char, color))
        scanner.skip_line()

    return ParsedGrid(Canvas.from_cells(width, height, cells), coerced)
