"""DrawSurface that writes ANSI escape sequences to a terminal stream."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from term_paint.cli.core.terminal import Terminal
from term_paint.core.constants import CSI, RESET, glyph_for
from term_paint.render.terminal import sgr_for


def _terminal_size() -> tuple[int, int]:
    size = Terminal.size()
    return size.cols, size.rows


class AnsiSurface:
    """
    Buffers cursor-addressed draw commands and writes them on flush.

    Cells are drawn as the palette color on black; a highlighted cell is
    drawn in reverse video.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        size: Callable[[], tuple[int, int]] = _terminal_size,
    ) -> None:
        self._stream = stream or sys.stdout
        self._size = size
        self._pending: list[str] = []

    def size(self) -> tuple[int, int]:
        return self._size()

    def draw_cell(
        self, screen_x: int, screen_y: int, char: str, color: int, highlighted: bool
    ) -> None:
        self._pending.append(
            f"{CSI}{screen_y + 1};{screen_x + 1}H{sgr_for(color, highlighted)}{glyph_for(char)}{RESET}"
        )

    def draw_status_line(self, row: int, text: str, bold: bool = False) -> None:
        cols, _ = self.size()
        # Stay off the last column so the bottom row never scrolls
        text = text[:max(cols - 1, 0)]
        style = f"{CSI}1m" if bold else ""
        self._pending.append(f"{CSI}{row + 1};1H{CSI}2K{style}{text}{RESET}")

    def flush(self) -> None:
        if self._pending:
            self._stream.write("".join(self._pending))
            self._pending.clear()
        self._stream.flush()
