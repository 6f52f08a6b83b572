"""Core data structures: cells, canvas, tool and application state."""

from term_paint.core.cell import Cell
from term_paint.core.canvas import Canvas
from term_paint.core.tool import ToolState
from term_paint.core.state import AppState, Cursor

__all__ = ["Cell", "Canvas", "ToolState", "AppState", "Cursor"]
