"""Input dispatcher - routes key events to editor operations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from term_paint.cli.core.input import KeyEvent
from term_paint.cli.core.shortcuts import (
    Action,
    ShortcutDef,
    ShortcutRegistry,
    create_default_shortcuts,
)
from term_paint.core.constants import DEFAULT_SAVE_FILE
from term_paint.core.state import AppState
from term_paint.edit.engine import PaintEngine
from term_paint.io import reader, writer
from term_paint.io.result import LoadResult, SaveResult
from term_paint.render.screen import Renderer

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Maps key events to paint, tool, file and quit operations.

    There is a single "running" state; each event is looked up in the
    binding table and performed to completion. Unbound keys do nothing.
    Failed saves and loads are no-ops for the session; their results are
    kept in ``last_result`` for anyone who wants to report them.
    """

    def __init__(
        self,
        state: AppState,
        engine: PaintEngine,
        renderer: Renderer,
        shortcuts: ShortcutRegistry | None = None,
        save_path: str | Path = DEFAULT_SAVE_FILE,
    ) -> None:
        self.state = state
        self.engine = engine
        self.renderer = renderer
        self.shortcuts = shortcuts or create_default_shortcuts()
        self.save_path = Path(save_path)
        self.last_result: LoadResult | SaveResult | None = None

    def dispatch(self, event: KeyEvent) -> Optional[ShortcutDef]:
        """Handle one event.

        The cursor highlight is removed first so that whatever the action
        repaints, no stale highlight is left behind. Re-highlighting and
        status text are the caller's job (``Renderer.refresh``).

        Returns:
            The shortcut that handled the event, or None if unbound
        """
        self.renderer.show_cursor(False)
        shortcut = self.shortcuts.match(event)
        if shortcut is None:
            return None
        self.perform(shortcut.action, shortcut.arg)
        return shortcut

    def perform(self, action: Action, arg: object = None) -> None:
        """Perform one editor action."""
        engine = self.engine
        if action is Action.MOVE:
            dx, dy = arg  # type: ignore[misc]
            engine.move_cursor(dx, dy)
        elif action is Action.PAINT:
            engine.paint_at_cursor()
        elif action is Action.TOGGLE_PEN:
            engine.toggle_pen()
        elif action is Action.CYCLE_BRUSH:
            engine.cycle_brush()
        elif action is Action.ERASER:
            engine.enter_eraser()
        elif action is Action.CYCLE_COLOR:
            engine.cycle_color()
        elif action is Action.SET_COLOR:
            engine.set_color(int(arg))  # type: ignore[arg-type]
        elif action is Action.CLEAR:
            engine.clear_canvas()
        elif action is Action.SAVE:
            self.save()
        elif action is Action.LOAD:
            self.load()
        elif action is Action.QUIT:
            logger.debug("Quit requested")
            self.state.running = False

    def save(self) -> SaveResult:
        result = writer.save(self.state.canvas, self.save_path)
        self.last_result = result
        return result

    def load(self) -> LoadResult:
        """Overlay the save file onto the canvas; repaint everything on success."""
        result = reader.load(self.state.canvas, self.save_path)
        self.last_result = result
        if result.ok:
            self.engine.canvas_changed()
        return result
