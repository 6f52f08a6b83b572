"""Low-level terminal operations."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from term_paint.core.constants import CSI, RESET
from term_paint.errors import StartupError


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O helpers for the editor."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def is_interactive() -> bool:
        return sys.stdin.isatty() and sys.stdout.isatty()

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write(f'{CSI}2J{CSI}H')

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal input (Unix only)."""
        try:
            import termios
            import tty
        except ImportError as e:
            raise StartupError("raw terminal input is not supported on this platform") from e

        fd = sys.stdin.fileno()
        try:
            old_settings = termios.tcgetattr(fd)
        except termios.error as e:
            raise StartupError(f"cannot configure terminal: {e}") from e
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        Terminal.write(f'{CSI}?1049h')
        try:
            yield
        finally:
            Terminal.write(f'{CSI}?1049l')

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input."""
        with Terminal.raw_mode():
            with Terminal.alternate_screen():
                Terminal.write(f'{CSI}?25l')
                try:
                    yield
                finally:
                    Terminal.write(f'{CSI}?25h{RESET}')
