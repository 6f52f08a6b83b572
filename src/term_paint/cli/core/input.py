"""Keyboard input handling with event abstraction."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


class InputReader:
    """
    Keyboard reader turning raw terminal bytes into KeyEvents.

    Uses os.read() to bypass Python's I/O buffering and handles escape
    sequences that arrive split across reads. A lone ESC is reported as
    Key.ESCAPE once no sequence follows it within a short delay; an ESC
    followed by anything other than '[' or 'O' is also Key.ESCAPE and the
    following character is read as a key of its own.
    """

    ESCAPE_TIMEOUT = 0.1

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
    }

    # Characters after ESC that start a CSI or SS3 sequence
    INTRODUCERS = frozenset("[O")

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
    }

    def __init__(self, fd: int | None = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def feed(self, data: str) -> None:
        """Queue raw input as if it had been read from the terminal."""
        self._buffer += data

    def read(self, timeout: float | None = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no complete event is available within timeout.
        A timeout of None waits indefinitely.
        """
        if not self._buffer:
            if not self._has_input(timeout):
                return None
            self._read_available()
        return self._process_buffer()

    def read_blocking(self) -> KeyEvent:
        """Read a key event, blocking until one is available.

        Raises:
            EOFError: If the terminal input is closed
        """
        while True:
            event = self.read(timeout=None)
            if event is not None:
                return event

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        self._read_chunk()
        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _read_chunk(self) -> None:
        try:
            data = os.read(self._fd, 1024)
        except BlockingIOError:
            return
        if not data:
            raise EOFError("terminal input closed")
        self._buffer += data.decode('utf-8', errors='replace')

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete."""
        deadline = time.monotonic() + self.ESCAPE_TIMEOUT

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            if not self._has_input(min(remaining, 0.025)):
                continue
            self._read_chunk()
            rest = self._buffer[1:]
            if rest and rest[0] not in self.INTRODUCERS:
                return
            # Sequence ends with a letter or ~ after its introducer
            if rest in self.SEQUENCES or (len(rest) > 1 and (rest[-1].isalpha() or rest[-1] == '~')):
                return

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        if not self._buffer:
            return None

        first = self._buffer[0]

        if first in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[first], raw=first)

        if first == '\x1b':
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]
        if first.isprintable():
            return KeyEvent(char=first, raw=first)

        # Unknown control character
        return KeyEvent(raw=first)

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]
        if not rest or rest[0] not in self.INTRODUCERS:
            # Just escape; whatever follows is read as its own key
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        # Find where this sequence ends
        end_idx = len(rest)
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                end_idx = i
                break
            if i > 0 and (ch.isalpha() or ch == '~'):
                end_idx = i + 1
                break

        seq = rest[:end_idx]
        self._buffer = rest[end_idx:]
        return KeyEvent(key=self.SEQUENCES.get(seq), raw='\x1b' + seq)

    def _has_input(self, timeout: float | None) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except (ValueError, OSError) as e:
            raise EOFError("terminal input unavailable") from e
        return bool(ready)
