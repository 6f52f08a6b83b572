"""Painting operations on a canvas."""

from term_paint.edit.engine import PaintEngine

__all__ = ["PaintEngine"]
