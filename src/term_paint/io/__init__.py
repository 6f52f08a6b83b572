"""Saving and loading canvases."""

from term_paint.io.reader import load, loads, read_file
from term_paint.io.result import LoadResult, LoadStatus, SaveResult, SaveStatus
from term_paint.io.writer import dumps, save

__all__ = [
    "load",
    "loads",
    "read_file",
    "save",
    "dumps",
    "LoadResult",
    "LoadStatus",
    "SaveResult",
    "SaveStatus",
]
