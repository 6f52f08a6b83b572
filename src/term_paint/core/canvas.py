"""Canvas - fixed-size grid of cells stored row-major."""

from __future__ import annotations

from typing import Iterator, Optional

from term_paint.core.cell import Cell
from term_paint.core.constants import (
    DEFAULT_COLOR,
    EMPTY_CHAR,
    MAX_CANVAS_HEIGHT,
    MAX_CANVAS_WIDTH,
    MIN_CANVAS_SIZE,
)


class Canvas:
    """
    A width x height grid of Cells.

    Cells live in a single flat list addressed as ``y * width + x``. The
    size is fixed for the lifetime of the canvas. Coordinates outside the
    grid are never an error: ``get`` returns None and ``set`` does nothing.
    """

    def __init__(self, width: int, height: int, fill: Cell | None = None) -> None:
        if not MIN_CANVAS_SIZE <= width <= MAX_CANVAS_WIDTH:
            raise ValueError(f"width must be {MIN_CANVAS_SIZE}-{MAX_CANVAS_WIDTH}, got {width}")
        if not MIN_CANVAS_SIZE <= height <= MAX_CANVAS_HEIGHT:
            raise ValueError(f"height must be {MIN_CANVAS_SIZE}-{MAX_CANVAS_HEIGHT}, got {height}")
        self._width = width
        self._height = height
        self._cells: list[Cell] = [fill or Cell()] * (width * height)

    @classmethod
    def from_cells(cls, width: int, height: int, cells: list[Cell]) -> Canvas:
        """Build a canvas from a row-major list of exactly width * height cells."""
        canvas = cls(width, height)
        if len(cells) != width * height:
            raise ValueError(f"expected {width * height} cells, got {len(cells)}")
        canvas._cells = list(cells)
        return canvas

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) addresses a cell of this canvas."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Get the cell at (x, y), or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[y * self._width + x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at (x, y). Out-of-bounds writes are ignored."""
        if not self.in_bounds(x, y):
            return
        self._cells[y * self._width + x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Optional[Cell]:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: canvas[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def fill(self, color: int = DEFAULT_COLOR) -> None:
        """Blank every cell, giving each the given color."""
        blank = Cell(EMPTY_CHAR, color)
        self._cells = [blank] * (self._width * self._height)

    def overlay(self, source: Canvas) -> tuple[int, int]:
        """
        Copy the overlapping top-left region of source onto this canvas.

        Only ``min(widths) x min(heights)`` cells at matching coordinates
        are written; everything outside that rectangle is left as it was.
        Returns the (width, height) of the copied region.
        """
        copy_w = min(source.width, self._width)
        copy_h = min(source.height, self._height)
        for y in range(copy_h):
            src = source._cells[y * source.width:y * source.width + copy_w]
            start = y * self._width
            self._cells[start:start + copy_w] = src
        return copy_w, copy_h

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        for y in range(self._height):
            yield self._cells[y * self._width:(y + 1) * self._width]

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for i, cell in enumerate(self._cells):
            y, x = divmod(i, self._width)
            yield x, y, cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
