"""ToolState - pen, brush and color selection."""

from __future__ import annotations

from dataclasses import dataclass, replace

from term_paint.core.constants import (
    BRUSH_COUNT,
    COLOR_COUNT,
    COLOR_NAMES,
    DEFAULT_BRUSHES,
    DEFAULT_COLOR,
    ERASER_CHAR,
    is_valid_color,
)


@dataclass(frozen=True)
class ToolState:
    """
    Current drawing tool settings.

    Every operation returns a new ToolState. The brush table is owned by
    the state; the eraser works by blanking slot 0 of the table, and both
    ``cycle_brush`` and ``eraser`` start again from the default table so
    an eraser override never survives a tool change.

    Attributes:
        pen_down: Paint on every cursor move
        brush_index: Slot of ``brushes`` used for painting
        color: Palette index (0-7) used for painting
        brushes: The brush table
    """
    pen_down: bool = False
    brush_index: int = 0
    color: int = DEFAULT_COLOR
    brushes: tuple[str, ...] = DEFAULT_BRUSHES

    def __post_init__(self) -> None:
        if not is_valid_color(self.color):
            raise ValueError(f"color must be 0-{COLOR_COUNT - 1}, got {self.color}")
        if not 0 <= self.brush_index < len(self.brushes):
            raise ValueError(f"brush_index out of range: {self.brush_index}")

    @property
    def brush_char(self) -> str:
        """Character placed by the next paint."""
        return self.brushes[self.brush_index]

    @property
    def color_name(self) -> str:
        return COLOR_NAMES[self.color]

    @property
    def erasing(self) -> bool:
        return self.brush_char == ERASER_CHAR

    def toggle_pen(self) -> ToolState:
        return replace(self, pen_down=not self.pen_down)

    def cycle_brush(self) -> ToolState:
        """Restore the default brushes and advance to the next one."""
        return replace(
            self,
            brushes=DEFAULT_BRUSHES,
            brush_index=(self.brush_index + 1) % BRUSH_COUNT,
        )

    def eraser(self) -> ToolState:
        """Restore the default brushes, select slot 0 and blank it."""
        brushes = (ERASER_CHAR,) + DEFAULT_BRUSHES[1:]
        return replace(self, brushes=brushes, brush_index=0)

    def cycle_color(self) -> ToolState:
        return replace(self, color=(self.color + 1) % COLOR_COUNT)

    def with_color(self, color: int) -> ToolState:
        """Select a palette color directly."""
        return replace(self, color=color)
