"""Shared fixtures: an in-memory draw surface and a small paint session."""

from __future__ import annotations

import pytest

from term_paint.core.canvas import Canvas
from term_paint.core.state import AppState
from term_paint.edit.engine import PaintEngine
from term_paint.render.screen import Renderer


class RecordingSurface:
    """DrawSurface that remembers what is on screen instead of drawing it."""

    def __init__(self, cols: int = 40, rows: int = 13) -> None:
        self.cols = cols
        self.rows = rows
        self.screen: dict[tuple[int, int], tuple[str, int, bool]] = {}
        self.draws: list[tuple[int, int, str, int, bool]] = []
        self.status: dict[int, tuple[str, bool]] = {}
        self.flushes = 0

    def size(self) -> tuple[int, int]:
        return self.cols, self.rows

    def draw_cell(
        self, screen_x: int, screen_y: int, char: str, color: int, highlighted: bool
    ) -> None:
        self.screen[(screen_x, screen_y)] = (char, color, highlighted)
        self.draws.append((screen_x, screen_y, char, color, highlighted))

    def draw_status_line(self, row: int, text: str, bold: bool = False) -> None:
        self.status[row] = (text, bold)

    def flush(self) -> None:
        self.flushes += 1

    def highlighted(self) -> list[tuple[int, int]]:
        """Screen positions currently drawn highlighted."""
        return [pos for pos, (_, _, hl) in self.screen.items() if hl]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def state() -> AppState:
    """A 5x3 blank canvas with the cursor centered at (2, 1)."""
    return AppState.for_canvas(Canvas(5, 3))


@pytest.fixture
def engine(state: AppState) -> PaintEngine:
    return PaintEngine(state)


@pytest.fixture
def renderer(state: AppState, surface: RecordingSurface) -> Renderer:
    return Renderer(state, surface)
