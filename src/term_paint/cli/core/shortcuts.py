"""Keyboard binding table for the paint editor.

Every key the editor understands is listed here once, with the action it
triggers. The status-line help text is generated from the same table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from term_paint.cli.core.input import Key, KeyEvent
from term_paint.core.constants import COLOR_COUNT


class Action(Enum):
    """Editor operations a key can trigger."""
    MOVE = auto()
    PAINT = auto()
    TOGGLE_PEN = auto()
    CYCLE_BRUSH = auto()
    ERASER = auto()
    CYCLE_COLOR = auto()
    SET_COLOR = auto()
    CLEAR = auto()
    SAVE = auto()
    LOAD = auto()
    QUIT = auto()


@dataclass
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        id: Unique identifier for the shortcut
        keys: Keys/chars that trigger this shortcut (chars are case-sensitive)
        action: Operation to perform
        arg: Argument for the action (movement delta, color index)
        hint: Key text shown in the status-line help
        description: Longer description for help output
        category: Group name in the status-line help
    """
    id: str
    keys: list[str | Key]
    action: Action
    arg: object = None
    hint: str = ""
    description: str = ""
    category: str = "General"

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False


@dataclass
class ShortcutRegistry:
    """Flat event -> action table. The first matching shortcut wins."""
    _shortcuts: list[ShortcutDef] = field(default_factory=list)

    def register(self, shortcut: ShortcutDef) -> None:
        self._shortcuts.append(shortcut)

    def register_many(self, shortcuts: list[ShortcutDef]) -> None:
        for shortcut in shortcuts:
            self.register(shortcut)

    def get(self, shortcut_id: str) -> Optional[ShortcutDef]:
        """Get a shortcut by ID."""
        for shortcut in self._shortcuts:
            if shortcut.id == shortcut_id:
                return shortcut
        return None

    def match(self, event: KeyEvent) -> Optional[ShortcutDef]:
        """Find the shortcut for an event, or None if it is not bound."""
        for shortcut in self._shortcuts:
            if shortcut.matches(event):
                return shortcut
        return None

    def all_shortcuts(self) -> list[ShortcutDef]:
        return list(self._shortcuts)

    def help_text(self) -> str:
        """One-line help: ``Category: hint/hint  |  ...`` in registration order."""
        by_category: dict[str, list[str]] = {}
        for shortcut in self._shortcuts:
            hints = by_category.setdefault(shortcut.category, [])
            if shortcut.hint and shortcut.hint not in hints:
                hints.append(shortcut.hint)
        return "  |  ".join(
            f"{category}: {'/'.join(hints)}" for category, hints in by_category.items() if hints
        )


def create_default_shortcuts() -> ShortcutRegistry:
    """Create the registry with the editor's key bindings."""
    registry = ShortcutRegistry()

    registry.register_many([
        ShortcutDef("move_up", [Key.UP], Action.MOVE, (0, -1), "Arrow keys", "Move cursor up", "Movement"),
        ShortcutDef("move_down", [Key.DOWN], Action.MOVE, (0, 1), "Arrow keys", "Move cursor down", "Movement"),
        ShortcutDef("move_left", [Key.LEFT], Action.MOVE, (-1, 0), "Arrow keys", "Move cursor left", "Movement"),
        ShortcutDef("move_right", [Key.RIGHT], Action.MOVE, (1, 0), "Arrow keys", "Move cursor right", "Movement"),
        ShortcutDef("paint", [" "], Action.PAINT, hint="Space",
                    description="Paint at cursor", category="Paint"),
        ShortcutDef("pen", [Key.ENTER], Action.TOGGLE_PEN, hint="Enter",
                    description="Toggle continuous painting", category="Pen"),
        ShortcutDef("brush", ["b", "B"], Action.CYCLE_BRUSH, hint="B",
                    description="Next brush", category="Tools"),
        # Lowercase only; uppercase C is unbound
        ShortcutDef("color", ["c"], Action.CYCLE_COLOR, hint="c",
                    description="Next color", category="Tools"),
        ShortcutDef("eraser", ["e", "E"], Action.ERASER, hint="E",
                    description="Eraser", category="Tools"),
        ShortcutDef("clear", ["x", "X"], Action.CLEAR, hint="X",
                    description="Clear canvas", category="Tools"),
    ])

    registry.register_many([
        ShortcutDef(f"color_{i}", [str(i)], Action.SET_COLOR, i, f"0-{COLOR_COUNT - 1}",
                    f"Select color {i}", "Colors")
        for i in range(COLOR_COUNT)
    ])

    registry.register_many([
        ShortcutDef("save", ["s", "S"], Action.SAVE, hint="S",
                    description="Save canvas", category="File"),
        ShortcutDef("load", ["l", "L"], Action.LOAD, hint="L",
                    description="Load canvas", category="File"),
        ShortcutDef("quit", ["q", "Q", Key.ESCAPE], Action.QUIT, hint="Q",
                    description="Quit", category="Quit"),
    ])

    return registry
