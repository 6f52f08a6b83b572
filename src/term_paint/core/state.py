"""Application state shared by the paint components."""

from __future__ import annotations

from dataclasses import dataclass, field

from term_paint.core.canvas import Canvas
from term_paint.core.tool import ToolState


@dataclass(frozen=True)
class Cursor:
    """Cursor position on the canvas."""
    x: int = 0
    y: int = 0

    @classmethod
    def centered(cls, canvas: Canvas) -> Cursor:
        return cls(canvas.width // 2, canvas.height // 2)

    def moved(self, dx: int, dy: int, width: int, height: int) -> Cursor:
        """Return the cursor moved by (dx, dy), clamped on each axis."""
        x = min(max(self.x + dx, 0), width - 1)
        y = min(max(self.y + dy, 0), height - 1)
        return Cursor(x, y)


@dataclass
class AppState:
    """
    Everything the editor mutates while running.

    Passed explicitly to the paint engine, renderer and dispatcher so each
    can be exercised on its own.
    """
    canvas: Canvas
    cursor: Cursor = field(default_factory=Cursor)
    tool: ToolState = field(default_factory=ToolState)
    running: bool = True

    @classmethod
    def for_canvas(cls, canvas: Canvas) -> AppState:
        """Fresh state with the cursor centered on canvas."""
        return cls(canvas=canvas, cursor=Cursor.centered(canvas))
