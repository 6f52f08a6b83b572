"""Interactive paint editor application.

Layout:
    +------------------------------------------+
    | Status: brush, color, pen, canvas size   |
    | Position + key help                      |
    +------------------------------------------+
    |                                          |
    |      Canvas (all remaining rows)         |
    |                                          |
    +------------------------------------------+
    | Tips                                     |
    +------------------------------------------+
"""

from __future__ import annotations

import logging
from typing import Optional

from term_paint.cli.core.input import InputReader, KeyEvent
from term_paint.cli.core.shortcuts import create_default_shortcuts
from term_paint.cli.core.surface import AnsiSurface
from term_paint.cli.core.terminal import Terminal
from term_paint.cli.dispatcher import Dispatcher
from term_paint.config import PaintConfig
from term_paint.core.canvas import Canvas
from term_paint.core.constants import (
    MAX_CANVAS_HEIGHT,
    MAX_CANVAS_WIDTH,
    MIN_TERMINAL_COLS,
    MIN_TERMINAL_ROWS,
    STATUS_LINES_BOTTOM,
    STATUS_LINES_TOP,
)
from term_paint.core.state import AppState
from term_paint.edit.engine import PaintEngine
from term_paint.errors import StartupError, TerminalTooSmallError
from term_paint.render.screen import DrawSurface, Renderer

logger = logging.getLogger(__name__)


def canvas_size_for(cols: int, rows: int) -> tuple[int, int]:
    """Canvas size that fits a display of cols x rows around the status rows.

    Raises:
        TerminalTooSmallError: If the display is below the minimum size
    """
    if cols < MIN_TERMINAL_COLS or rows < MIN_TERMINAL_ROWS:
        raise TerminalTooSmallError(cols, rows, MIN_TERMINAL_COLS, MIN_TERMINAL_ROWS)
    width = min(cols, MAX_CANVAS_WIDTH)
    height = min(rows - (STATUS_LINES_TOP + STATUS_LINES_BOTTOM), MAX_CANVAS_HEIGHT)
    return width, height


class PaintApp:
    """
    Wires the canvas, paint engine, renderer and dispatcher together.

    The canvas is sized once from the surface at construction and keeps
    that size for the whole session.
    """

    def __init__(self, surface: DrawSurface, config: PaintConfig | None = None) -> None:
        self.config = config or PaintConfig()
        self.surface = surface

        width, height = canvas_size_for(*surface.size())
        self.state = AppState.for_canvas(Canvas(width, height))

        shortcuts = create_default_shortcuts()
        self.renderer = Renderer(
            self.state,
            surface,
            save_path=str(self.config.save_path),
            help_text=shortcuts.help_text(),
        )
        self.engine = PaintEngine(self.state)
        self.engine.on_cell_changed(self.renderer.render_cell)
        self.engine.on_canvas_changed(self.renderer.render_all)
        self.dispatcher = Dispatcher(
            self.state,
            self.engine,
            self.renderer,
            shortcuts,
            save_path=self.config.save_path,
        )
        logger.info("Canvas %dx%d, save file %s", width, height, self.config.save_path)

    @property
    def running(self) -> bool:
        return self.state.running

    def start(self) -> None:
        """Draw the first frame, loading the save file first if configured."""
        # A successful load already repainted the whole canvas
        if not (self.config.load_on_start and self.dispatcher.load().ok):
            self.renderer.render_all()
        self.renderer.refresh()

    def handle_event(self, event: KeyEvent) -> None:
        """Process one event to completion and redraw what it touched."""
        self.dispatcher.dispatch(event)
        self.renderer.refresh()

    def run(self, reader: InputReader) -> None:
        """Event loop: block for a key, handle it, repeat until quit."""
        self.start()
        while self.state.running:
            try:
                event = reader.read_blocking()
            except EOFError:
                logger.info("Input closed, leaving editor")
                break
            self.handle_event(event)


def run_editor(config: Optional[PaintConfig] = None) -> None:
    """Run the editor in the current terminal.

    Raises:
        StartupError: If stdin/stdout is not a terminal, the terminal cannot
            be switched to raw mode or it is smaller than 20x10
    """
    config = config or PaintConfig()
    if not Terminal.is_interactive():
        raise StartupError("term-paint needs an interactive terminal")

    # Check the size before touching terminal modes so errors print normally
    size = Terminal.size()
    canvas_size_for(size.cols, size.rows)

    with Terminal.managed_mode():
        Terminal.clear()
        app = PaintApp(AnsiSurface(), config)
        app.run(InputReader())
