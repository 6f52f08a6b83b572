"""Render a canvas to terminal-compatible escape sequences."""

from term_paint.core.canvas import Canvas
from term_paint.core.constants import CSI, RESET, glyph_for


def sgr_for(color: int, highlighted: bool = False) -> str:
    """SGR sequence for a palette color on the black background."""
    codes = f"{30 + color};40"
    if highlighted:
        codes += ";7"
    return f"{CSI}{codes}m"


class TerminalRenderer:
    """
    Render a Canvas to ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when the color changes.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, canvas: Canvas) -> str:
        """Render canvas to ANSI string."""
        lines: list[str] = []

        for row in canvas.rows():
            # Find last non-empty cell to avoid trailing spaces
            last_col = -1
            for x, cell in enumerate(row):
                if not cell.is_empty():
                    last_col = x

            line_parts: list[str] = []
            last_color: int | None = None
            for cell in row[:last_col + 1]:
                if cell.color != last_color:
                    line_parts.append(sgr_for(cell.color))
                    last_color = cell.color
                line_parts.append(glyph_for(cell.char))

            # Reset at end of each line to prevent color bleeding
            if last_color is not None:
                line_parts.append(RESET)

            lines.append(''.join(line_parts))

        result = '\n'.join(lines)

        if self.reset_at_end:
            result += RESET

        return result
