"""Render a canvas to plain text (strip colors)."""

from term_paint.core.canvas import Canvas
from term_paint.core.constants import glyph_for


class TextRenderer:
    """Render a Canvas to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, canvas: Canvas) -> str:
        """Render canvas to plain text."""
        lines: list[str] = []

        for row in canvas.rows():
            line = ''.join(glyph_for(cell.char) for cell in row)
            if not self.preserve_whitespace:
                line = line.rstrip()
            lines.append(line)

        result = '\n'.join(lines)

        if not self.preserve_whitespace:
            # Remove trailing empty lines
            result = result.rstrip('\n')

        return result
