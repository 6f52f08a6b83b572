"""Save canvases to disk."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO

from term_paint.codec.grid_text import encode
from term_paint.core.canvas import Canvas
from term_paint.core.constants import DEFAULT_SAVE_FILE
from term_paint.io.result import SaveResult, SaveStatus

logger = logging.getLogger(__name__)


def dumps(canvas: Canvas) -> str:
    """Serialize a canvas to the saved-file text."""
    return encode(canvas)


def save(canvas: Canvas, target: str | Path | IO[str] | IO[bytes] | None = None) -> SaveResult:
    """
    Save a canvas to a path or a writable stream.

    Binary streams receive the ASCII-encoded text.

    Failing to open or write the destination is reported in the result and
    never raised; the canvas is not touched either way.
    """
    content = encode(canvas)

    if target is not None and hasattr(target, "write"):
        name = getattr(target, "name", "<stream>")
        try:
            if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
                target.write(content.encode("ascii"))
            else:
                target.write(content)
        except (OSError, ValueError) as e:
            logger.warning("Could not write canvas to %s: %s", name, e)
            return SaveResult(SaveStatus.WRITE_ERROR, str(name), str(e))
        return SaveResult(SaveStatus.OK, str(name))

    path = Path(target if target is not None else DEFAULT_SAVE_FILE)
    try:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(content)
    except (OSError, ValueError) as e:
        logger.warning("Could not save canvas to %s: %s", path, e)
        return SaveResult(SaveStatus.WRITE_ERROR, str(path), str(e))

    logger.debug("Saved %dx%d canvas to %s", canvas.width, canvas.height, path)
    return SaveResult(SaveStatus.OK, str(path))
