"""Outcome values for load and save."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LoadStatus(Enum):
    """How a load attempt ended."""
    OK = "ok"                  # Applied, every value in range
    COERCED = "coerced"        # Applied, some values replaced by defaults
    UNREADABLE = "unreadable"  # Source could not be opened or read
    BAD_HEADER = "bad_header"  # Missing or out-of-range dimensions
    MALFORMED = "malformed"    # A cell pair could not be parsed
    NO_MEMORY = "no_memory"    # Scratch grid could not be allocated


class SaveStatus(Enum):
    """How a save attempt ended."""
    OK = "ok"
    WRITE_ERROR = "write_error"


@dataclass(frozen=True)
class LoadResult:
    """
    Result of loading a file onto a canvas.

    Attributes:
        status: Outcome of the load
        file_size: (width, height) declared by the file, if the header parsed
        copied: (width, height) of the region written to the canvas
        coerced: Number of out-of-range values replaced by defaults
        message: Human-readable failure detail
    """
    status: LoadStatus
    file_size: tuple[int, int] | None = None
    copied: tuple[int, int] = (0, 0)
    coerced: int = 0
    message: str = ""

    @property
    def ok(self) -> bool:
        """Whether the file was applied to the canvas."""
        return self.status in (LoadStatus.OK, LoadStatus.COERCED)

    @property
    def changed(self) -> bool:
        """Whether any canvas cell may have been written."""
        return self.ok and self.copied != (0, 0)


@dataclass(frozen=True)
class SaveResult:
    """Result of saving a canvas."""
    status: SaveStatus
    path: str | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is SaveStatus.OK
