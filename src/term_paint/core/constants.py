"""Shared constants for term-paint."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Canvas limits
MIN_CANVAS_SIZE = 1
MAX_CANVAS_WIDTH = 1000
MAX_CANVAS_HEIGHT = 1000

# Minimum terminal size the editor will start in (cols, rows)
MIN_TERMINAL_COLS = 20
MIN_TERMINAL_ROWS = 10

# Rows reserved for status text above and below the canvas
STATUS_LINES_TOP = 2
STATUS_LINES_BOTTOM = 1

DEFAULT_SAVE_FILE = "paint_save.txt"

# 8-color palette: index -> name. Index 7 (white) is the default and the
# fallback for out-of-range colors read from disk.
COLOR_NAMES: tuple[str, ...] = (
    "BLACK", "RED", "GREEN", "YELLOW", "BLUE", "MAGENTA", "CYAN", "WHITE",
)
COLOR_COUNT = len(COLOR_NAMES)
DEFAULT_COLOR = 7

# Brush characters ordered by visual density
DEFAULT_BRUSHES: tuple[str, ...] = ('#', '*', '@', '%', '+', 'o', 'x', '.', '~', '&')
BRUSH_COUNT = len(DEFAULT_BRUSHES)
ERASER_CHAR = ' '

EMPTY_CHAR = ' '
MAX_CHAR_CODE = 255

# CP437 glyphs for character codes 0x00-0xFF, used when drawing cells whose
# code is outside printable ASCII.
# Source: https://en.wikipedia.org/wiki/Code_page_437
CP437_TO_UNICODE: tuple[str, ...] = (
    # 0x00-0x1F: Control characters mapped to symbols
    ' ', '☺', '☻', '♥', '♦', '♣', '♠', '•',
    '◘', '○', '◙', '♂', '♀', '♪', '♫', '☼',
    '►', '◄', '↕', '‼', '¶', '§', '▬', '↨',
    '↑', '↓', '→', '←', '∟', '↔', '▲', '▼',
    # 0x20-0x7E: Standard ASCII (printable)
    ' ', '!', '"', '#', '$', '%', '&', "'", '(', ')', '*', '+', ',', '-', '.', '/',
    '0', '1', '2', '3', '4', '5', '6', '7', '8', '9', ':', ';', '<', '=', '>', '?',
    '@', 'A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'I', 'J', 'K', 'L', 'M', 'N', 'O',
    'P', 'Q', 'R', 'S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z', '[', '\\', ']', '^', '_',
    '`', 'a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'i', 'j', 'k', 'l', 'm', 'n', 'o',
    'p', 'q', 'r', 's', 't', 'u', 'v', 'w', 'x', 'y', 'z', '{', '|', '}', '~', '⌂',
    # 0x80-0xFF: Extended ASCII
    'Ç', 'ü', 'é', 'â', 'ä', 'à', 'å', 'ç',
    'ê', 'ë', 'è', 'ï', 'î', 'ì', 'Ä', 'Å',
    'É', 'æ', 'Æ', 'ô', 'ö', 'ò', 'û', 'ù',
    'ÿ', 'Ö', 'Ü', '¢', '£', '¥', '₧', 'ƒ',
    'á', 'í', 'ó', 'ú', 'ñ', 'Ñ', 'ª', 'º',
    '¿', '⌐', '¬', '½', '¼', '¡', '«', '»',
    '░', '▒', '▓', '│', '┤', '╡', '╢', '╖',
    '╕', '╣', '║', '╗', '╝', '╜', '╛', '┐',
    '└', '┴', '┬', '├', '─', '┼', '╞', '╟',
    '╚', '╔', '╩', '╦', '╠', '═', '╬', '╧',
    '╨', '╤', '╥', '╙', '╘', '╒', '╓', '╫',
    '╪', '┘', '┌', '█', '▄', '▌', '▐', '▀',
    'α', 'ß', 'Γ', 'π', 'Σ', 'σ', 'µ', 'τ',
    'Φ', 'Θ', 'Ω', 'δ', '∞', 'φ', 'ε', '∩',
    '≡', '±', '≥', '≤', '⌠', '⌡', '÷', '≈',
    '°', '∙', '·', '√', 'ⁿ', '²', '■', ' ',
)


def glyph_for(char: str) -> str:
    """Map a stored cell character (code 0-255) to a displayable glyph."""
    return CP437_TO_UNICODE[ord(char)]


def is_valid_color(index: int) -> bool:
    """Check if index is a palette color (0-7)."""
    return 0 <= index < COLOR_COUNT
