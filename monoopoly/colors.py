"""Player colours and their terminal escape sequences."""

from enum import IntEnum


class ColorType(IntEnum):
    """Colour slots: the default text colour and one per player."""

    DEFAULT = 0
    PLAYER1 = 1
    PLAYER2 = 2
    PLAYER3 = 3
    PLAYER4 = 4
    PLAYER5 = 5
    PLAYER6 = 6


_CONSOLE_CODES = {
    ColorType.DEFAULT: 15,
    ColorType.PLAYER1: 10,
    ColorType.PLAYER2: 11,
    ColorType.PLAYER3: 12,
    ColorType.PLAYER4: 13,
    ColorType.PLAYER5: 14,
    ColorType.PLAYER6: 8,
}


def console_color_code(color) -> int:
    """Console text attribute (blue=1, green=2, red=4, bright=8) for a colour."""
    try:
        return _CONSOLE_CODES[ColorType(color)]
    except ValueError:
        return _CONSOLE_CODES[ColorType.DEFAULT]


def ansi_sequence(color) -> str:
    """ANSI escape sequence that selects the same colour as the console code."""
    code = console_color_code(color)
    low = code & 7
    # Console attributes order the bits blue, green, red; ANSI orders them red, green, blue.
    ansi_index = ((low & 1) << 2) | (low & 2) | ((low & 4) >> 2)
    base = 90 if code & 8 else 30
    return f"\x1b[{base + ansi_index}m"


def colorize(text: str, color) -> str:
    """Wrap text in the colour's sequence and switch back to the default colour."""
    return f"{ansi_sequence(color)}{text}{ansi_sequence(ColorType.DEFAULT)}"


def player_color(player_index: int) -> ColorType:
    """Colour used for the player with the given zero-based index."""
    return ColorType(player_index + 1)