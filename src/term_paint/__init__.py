"""
term-paint: character-grid painting in the terminal

Quick Start:
    >>> import term_paint as paint
    >>> canvas = paint.Canvas(40, 10)
    >>> canvas.set(3, 2, paint.Cell('#', 2))
    >>> paint.save(canvas, "paint_save.txt")
    >>> paint.load(canvas, "paint_save.txt").ok
    True

Features:
    - Fixed-size canvas of (character, color) cells with 8 colors
    - Cursor painting with pen mode, 10 brushes and an eraser
    - Plain-text save format with overlay loading onto any canvas size
    - Interactive editor for ANSI terminals (``term-paint paint``)
"""

__version__ = "0.1.0"

# Core types
from term_paint.core.cell import Cell
from term_paint.core.canvas import Canvas
from term_paint.core.tool import ToolState
from term_paint.core.state import AppState, Cursor

# Painting
from term_paint.edit.engine import PaintEngine

# I/O
from term_paint.io import LoadResult, LoadStatus, SaveResult, SaveStatus, dumps, load, loads, save

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Canvas",
    "ToolState",
    "AppState",
    "Cursor",
    # Painting
    "PaintEngine",
    # I/O
    "load",
    "loads",
    "save",
    "dumps",
    "LoadResult",
    "LoadStatus",
    "SaveResult",
    "SaveStatus",
]
