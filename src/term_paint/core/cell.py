"""Cell - atomic unit of the paint canvas."""

from dataclasses import dataclass

from term_paint.core.constants import (
    DEFAULT_COLOR,
    EMPTY_CHAR,
    MAX_CHAR_CODE,
    is_valid_color,
)


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with its palette color.

    The character is one byte (code 0-255) held as a one-character string;
    a space means the cell is empty. The color is an index into the
    8-color palette. Both are validated on construction, so a Cell that
    exists is always storable and drawable.
    """
    char: str = EMPTY_CHAR
    color: int = DEFAULT_COLOR

    def __post_init__(self) -> None:
        if len(self.char) != 1 or ord(self.char) > MAX_CHAR_CODE:
            raise ValueError(f"Cell character must be a single byte, got {self.char!r}")
        if not is_valid_color(self.color):
            raise ValueError(f"Cell color must be 0-7, got {self.color}")

    @classmethod
    def from_code(cls, code: int, color: int) -> "Cell":
        """Create a cell from a numeric character code."""
        return cls(chr(code), color)

    @property
    def code(self) -> int:
        """Numeric character code as written to disk."""
        return ord(self.char)

    def is_empty(self) -> bool:
        """Check if this cell holds no visible character."""
        return self.char == EMPTY_CHAR
