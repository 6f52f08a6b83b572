"""Load saved files onto a live canvas."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from term_paint.codec.grid_text import ParsedGrid, decode
from term_paint.core.canvas import Canvas
from term_paint.core.constants import DEFAULT_SAVE_FILE
from term_paint.errors import FormatError, HeaderError
from term_paint.io.result import LoadResult, LoadStatus

logger = logging.getLogger(__name__)


def _read_text(source: str | Path | IO[str] | IO[bytes] | None) -> str:
    """Read a path or stream as text. Bytes are decoded as Latin-1."""
    if source is not None and hasattr(source, "read"):
        data = source.read()
    else:
        data = Path(source if source is not None else DEFAULT_SAVE_FILE).read_bytes()
    if isinstance(data, bytes):
        return data.decode("latin-1")
    return data


def loads(canvas: Canvas, text: str) -> LoadResult:
    """
    Overlay saved-file text onto canvas.

    The whole text is decoded into a scratch canvas first; the live canvas
    is only written once decoding has succeeded, and then only inside the
    rectangle both canvases share. The live canvas never changes size and
    cells outside the shared rectangle keep their content.
    """
    try:
        parsed = decode(text)
    except HeaderError as e:
        logger.warning("Load aborted, bad header: %s", e)
        return LoadResult(LoadStatus.BAD_HEADER, message=str(e))
    except FormatError as e:
        logger.warning("Load aborted, canvas unchanged: %s", e)
        return LoadResult(LoadStatus.MALFORMED, message=str(e))
    except MemoryError:
        logger.warning("Load aborted, not enough memory for scratch canvas")
        return LoadResult(LoadStatus.NO_MEMORY, message="out of memory")

    copied = canvas.overlay(parsed.canvas)
    status = LoadStatus.COERCED if parsed.coerced else LoadStatus.OK
    logger.debug(
        "Loaded %dx%d file, copied %dx%d region, %d values coerced",
        parsed.canvas.width, parsed.canvas.height, *copied, parsed.coerced,
    )
    return LoadResult(
        status,
        file_size=parsed.canvas.size,
        copied=copied,
        coerced=parsed.coerced,
    )


def load(canvas: Canvas, source: str | Path | IO[str] | IO[bytes] | None = None) -> LoadResult:
    """
    Overlay a saved file onto canvas.

    Args:
        canvas: Live canvas to update in place
        source: Path or readable stream (default: paint_save.txt)

    Returns:
        LoadResult; on any failure the canvas is unchanged
    """
    try:
        text = _read_text(source)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", source or DEFAULT_SAVE_FILE, e)
        return LoadResult(LoadStatus.UNREADABLE, message=str(e))
    return loads(canvas, text)


def read_file(path: str | Path) -> ParsedGrid:
    """
    Decode a saved file into a canvas of the file's own size.

    Unlike ``load`` this raises instead of degrading to a no-op, for
    callers that report problems to the user.

    Raises:
        OSError: If the file cannot be read
        FormatError: If the file is structurally malformed
    """
    return decode(_read_text(Path(path)))
