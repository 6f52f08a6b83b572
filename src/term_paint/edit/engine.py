"""PaintEngine - turns drawing intents into canvas mutations."""

from __future__ import annotations

import logging
from typing import Callable

from term_paint.core.cell import Cell
from term_paint.core.state import AppState

logger = logging.getLogger(__name__)


class PaintEngine:
    """Cursor movement, painting and tool changes over an AppState.

    The engine never draws. It reports what changed through two callbacks
    so the caller can repaint just enough of the screen:

        on_cell_changed(x, y): one cell was written
        on_canvas_changed(): the whole canvas was rewritten

    Example:
        engine = PaintEngine(AppState.for_canvas(Canvas(40, 20)))
        engine.on_cell_changed(renderer.render_cell)
        engine.toggle_pen()
        engine.move_cursor(1, 0)  # paints the new cell
    """

    def __init__(self, state: AppState) -> None:
        self.state = state
        self._on_cell_changed: Callable[[int, int], None] | None = None
        self._on_canvas_changed: Callable[[], None] | None = None

    # -------------------------------------------------------------------------
    # Callbacks
    # -------------------------------------------------------------------------

    def on_cell_changed(self, callback: Callable[[int, int], None] | None) -> None:
        """Register callback for single-cell writes. Receives (x, y)."""
        self._on_cell_changed = callback

    def on_canvas_changed(self, callback: Callable[[], None] | None) -> None:
        """Register callback for whole-canvas rewrites."""
        self._on_canvas_changed = callback

    def _cell_changed(self, x: int, y: int) -> None:
        if self._on_cell_changed:
            self._on_cell_changed(x, y)

    def canvas_changed(self) -> None:
        """Notify that the whole canvas needs repainting."""
        if self._on_canvas_changed:
            self._on_canvas_changed()

    # -------------------------------------------------------------------------
    # Cursor and painting
    # -------------------------------------------------------------------------

    def move_cursor(self, dx: int, dy: int) -> bool:
        """Move the cursor, clamping each axis to the canvas.

        With the pen down the new cell is painted, but only when the cursor
        actually moved; pushing against an edge paints nothing.

        Returns:
            True if the cursor position changed
        """
        state = self.state
        moved = state.cursor.moved(dx, dy, state.canvas.width, state.canvas.height)
        if moved == state.cursor:
            return False
        state.cursor = moved
        if state.tool.pen_down:
            self.paint_at_cursor()
        return True

    def paint_at_cursor(self) -> None:
        """Write the current brush and color to the cell under the cursor."""
        state = self.state
        x, y = state.cursor.x, state.cursor.y
        state.canvas.set(x, y, Cell(state.tool.brush_char, state.tool.color))
        self._cell_changed(x, y)

    def clear_canvas(self) -> None:
        """Blank every cell using the current color."""
        self.state.canvas.fill(self.state.tool.color)
        logger.debug("Canvas cleared with color %d", self.state.tool.color)
        self.canvas_changed()

    # -------------------------------------------------------------------------
    # Tool state
    # -------------------------------------------------------------------------

    def toggle_pen(self) -> None:
        self.state.tool = self.state.tool.toggle_pen()

    def cycle_brush(self) -> None:
        self.state.tool = self.state.tool.cycle_brush()

    def enter_eraser(self) -> None:
        self.state.tool = self.state.tool.eraser()

    def cycle_color(self) -> None:
        self.state.tool = self.state.tool.cycle_color()

    def set_color(self, index: int) -> None:
        """Select palette color 0-7 directly."""
        self.state.tool = self.state.tool.with_color(index)
