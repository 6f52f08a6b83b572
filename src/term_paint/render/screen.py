"""Selective redraw of the canvas and status text onto a draw surface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from term_paint.core.constants import (
    DEFAULT_SAVE_FILE,
    STATUS_LINES_BOTTOM,
    STATUS_LINES_TOP,
)
from term_paint.core.state import AppState


@runtime_checkable
class DrawSurface(Protocol):
    """Protocol for anything the renderer can draw on."""

    def size(self) -> tuple[int, int]:
        """Current display size as (columns, rows)."""
        ...

    def draw_cell(
        self, screen_x: int, screen_y: int, char: str, color: int, highlighted: bool
    ) -> None:
        """Draw one character at a screen position in a palette color."""
        ...

    def draw_status_line(self, row: int, text: str, bold: bool = False) -> None:
        """Replace a whole screen row with text."""
        ...

    def flush(self) -> None:
        """Make everything drawn so far visible."""
        ...


def canvas_to_screen(x: int, y: int) -> tuple[int, int]:
    """Map canvas coordinates to screen coordinates below the header rows."""
    return x, y + STATUS_LINES_TOP


def status_lines(
    state: AppState,
    screen_rows: int,
    save_path: str = DEFAULT_SAVE_FILE,
    help_text: str = "",
) -> list[tuple[int, str, bool]]:
    """Build the status text as (row, text, bold) tuples.

    Two header rows sit above the canvas and one footer row below it.
    """
    tool = state.tool
    canvas = state.canvas
    header = (
        f"Terminal Paint  |  Brush: '{tool.brush_char}'  |  Color: {tool.color_name}"
        f"  |  Pen: {'DOWN' if tool.pen_down else 'UP'}"
        f"  |  Canvas: {canvas.width}x{canvas.height}"
    )
    position = f"Position: ({state.cursor.x},{state.cursor.y})"
    if help_text:
        position += f"  |  {help_text}"
    tips = (
        "Tips: Enter toggles pen mode for continuous painting. "
        f"Files save to '{save_path}'. Use 0-7 for quick color selection."
    )
    lines = [(0, header, True), (1, position, False)]
    if STATUS_LINES_BOTTOM:
        lines.append((screen_rows - 1, tips, False))
    return lines


class Renderer:
    """
    Draws canvas cells and status text onto a DrawSurface.

    Only ``render_all`` touches every cell; painting goes through
    ``render_cell`` so a keypress costs one cell write. The cursor
    highlight is drawn over the canvas and is never stored in it:
    ``show_cursor(False)`` restores the plain cell before an event is
    handled and ``show_cursor(True)`` puts the highlight back afterwards.
    """

    def __init__(
        self,
        state: AppState,
        surface: DrawSurface,
        save_path: str = DEFAULT_SAVE_FILE,
        help_text: str = "",
    ) -> None:
        self.state = state
        self.surface = surface
        self.save_path = save_path
        self.help_text = help_text

    def render_cell(self, x: int, y: int, highlighted: bool = False) -> None:
        """Draw the canvas cell at (x, y). Out-of-bounds cells are skipped."""
        cell = self.state.canvas.get(x, y)
        if cell is None:
            return
        screen_x, screen_y = canvas_to_screen(x, y)
        self.surface.draw_cell(screen_x, screen_y, cell.char, cell.color, highlighted)

    def render_all(self) -> None:
        """Draw every canvas cell."""
        canvas = self.state.canvas
        for y in range(canvas.height):
            for x in range(canvas.width):
                self.render_cell(x, y)

    def show_cursor(self, show: bool) -> None:
        """Draw the cell under the cursor highlighted or plain."""
        cursor = self.state.cursor
        self.render_cell(cursor.x, cursor.y, highlighted=show)

    def render_status(self) -> None:
        _, rows = self.surface.size()
        for row, text, bold in status_lines(self.state, rows, self.save_path, self.help_text):
            self.surface.draw_status_line(row, text, bold)

    def refresh(self) -> None:
        """Finish a frame: status text, cursor highlight, flush."""
        self.render_status()
        self.show_cursor(True)
        self.surface.flush()
