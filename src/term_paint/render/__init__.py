"""Renderers for drawing canvases on screens and as text."""

from term_paint.render.screen import DrawSurface, Renderer, canvas_to_screen, status_lines
from term_paint.render.terminal import TerminalRenderer
from term_paint.render.text import TextRenderer

__all__ = [
    "DrawSurface",
    "Renderer",
    "canvas_to_screen",
    "status_lines",
    "TerminalRenderer",
    "TextRenderer",
]
