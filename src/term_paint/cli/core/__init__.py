"""Terminal I/O, key input and key bindings for the editor."""

from term_paint.cli.core.input import InputReader, Key, KeyEvent
from term_paint.cli.core.shortcuts import (
    Action,
    ShortcutDef,
    ShortcutRegistry,
    create_default_shortcuts,
)
from term_paint.cli.core.surface import AnsiSurface
from term_paint.cli.core.terminal import Terminal, TerminalSize

__all__ = [
    "Terminal",
    "TerminalSize",
    "AnsiSurface",
    "InputReader",
    "KeyEvent",
    "Key",
    "Action",
    "ShortcutDef",
    "ShortcutRegistry",
    "create_default_shortcuts",
]
