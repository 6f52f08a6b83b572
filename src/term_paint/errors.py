"""Exception hierarchy for term-paint."""

from __future__ import annotations


class PaintError(Exception):
    """Base class for all term-paint errors."""


class FormatError(PaintError, ValueError):
    """A saved canvas file is structurally malformed.

    Raised by the decoder when the header or a cell pair cannot be parsed.
    Out-of-range values inside an otherwise well-formed pair are not errors;
    they are coerced by the decoder instead.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.reason = message
        self.line = line
        self.column = column


class HeaderError(FormatError):
    """The dimensions line of a saved file is missing or out of range."""


class StartupError(PaintError):
    """The editor cannot start (no terminal, display init failure)."""


class TerminalTooSmallError(StartupError):
    """The terminal is below the minimum usable size."""

    def __init__(self, cols: int, rows: int, min_cols: int, min_rows: int) -> None:
        super().__init__(
            f"Terminal too small: {cols}x{rows} (minimum {min_cols}x{min_rows})"
        )
        self.cols = cols
        self.rows = rows
