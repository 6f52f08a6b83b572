"""Encoding/decoding for saved canvas files."""

from term_paint.codec.grid_text import ParsedGrid, decode, encode

__all__ = ["ParsedGrid", "decode", "encode"]
