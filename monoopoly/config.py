"""Game-wide settings: board geometry, player limits and starting money."""

SAVE_FILE_PATH = "Fields.txt"

MAX_PLAYERS = 6
MIN_PLAYERS = 2

STARTING_MONEY = 1500

FIELD_WIDTH = 10
FIELD_HEIGHT = 3

BOARD_WIDTH = 9
BOARD_HEIGHT = 5


def board_field_count(width: int, height: int) -> int:
    """Number of fields around a board of the given width and height.

    The four corner fields are shared by two sides and counted once.
    """
    return width * 2 + height * 2 - 4


NUMBER_OF_FIELDS = board_field_count(BOARD_WIDTH, BOARD_HEIGHT)