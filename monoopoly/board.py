"""The game board: its fields, its players and its text rendering."""

from pathlib import Path

from .config import BOARD_HEIGHT, BOARD_WIDTH, FIELD_HEIGHT, FIELD_WIDTH, NUMBER_OF_FIELDS
from .fields import (
    CardField,
    Field,
    FieldType,
    GoToJailField,
    JailField,
    ParkingField,
    PropertyField,
    StartField,
)
from .player import Player
from .printable import BORDER_LINE, PrintableField

_SIMPLE_FIELDS = {
    FieldType.START: StartField,
    FieldType.CARD: CardField,
    FieldType.GO_TO_JAIL: GoToJailField,
    FieldType.JAIL: JailField,
    FieldType.PARKING: ParkingField,
}

_LINE_NUMBERS = [BORDER_LINE, *range(FIELD_HEIGHT), BORDER_LINE]


def parse_fields(text: str, count: int) -> list[Field]:
    """Parse ``count`` fields from whitespace-separated board data.

    Each field starts with its type number; a property is followed by its
    name, colour, price, rent, cottage price and castle price.
    Raises ValueError when the data is short or malformed.
    """
    tokens = iter(text.split())

    def take(index: int, what: str) -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError(f"board data ends before the {what} of field {index}") from None

    def take_int(index: int, what: str) -> int:
        token = take(index, what)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"field {index}: {what} {token!r} is not a number") from None

    fields: list[Field] = []
    for index in range(count):
        raw_type = take_int(index, "type")
        try:
            kind = FieldType(raw_type)
        except ValueError:
            raise ValueError(f"field {index}: unknown field type {raw_type}") from None
        if kind is FieldType.PROPERTY:
            name = take(index, "name")
            color = take(index, "color")
            price = take_int(index, "price")
            default_rent = take_int(index, "rent")
            cottage_price = take_int(index, "cottage price")
            castle_price = take_int(index, "castle price")
            fields.append(
                PropertyField(index, name, color, price, default_rent, cottage_price, castle_price)
            )
        else:
            fields.append(_SIMPLE_FIELDS[kind](index))
    return fields


def load_fields(path, count: int) -> list[Field]:
    """Read and parse ``count`` fields from a board file."""
    return parse_fields(Path(path).read_text(), count)


class Board:
    """The ring of fields and the players moving around it."""

    def __init__(self, path):
        self.number_of_fields = NUMBER_OF_FIELDS
        self.fields = load_fields(path, self.number_of_fields)
        self.players: list[Player] = []
        self.is_game_over = False
        self._active_player_index = 0

    @property
    def active_player_index(self) -> int:
        return self._active_player_index

    @active_player_index.setter
    def active_player_index(self, value: int) -> None:
        value = max(value, 0)
        if self.players and value >= len(self.players):
            value %= len(self.players)
        self._active_player_index = value

    def set_players(self, names) -> None:
        """Seat a new player for each name, in order."""
        self.players = [Player(index, name) for index, name in enumerate(names)]

    def player(self, index: int) -> Player:
        return self.players[index]

    def field(self, index: int) -> Field:
        return self.fields[index]

    def active_player(self) -> Player:
        return self.players[self.active_player_index]

    def display_index(self, index: int) -> int:
        """Field shown at a drawing slot.

        Slots run along the top row, then left/right pairs down the sides,
        then along the bottom row; fields run clockwise from the top left.
        """
        count = self.number_of_fields
        if index < BOARD_WIDTH:
            return index
        if index < count - BOARD_WIDTH:
            offset = index - BOARD_WIDTH
            if index % 2 == BOARD_WIDTH % 2:
                return count - offset // 2 - 1
            return BOARD_WIDTH + (offset - 1) // 2
        previous = BOARD_WIDTH + (BOARD_HEIGHT - 2) * 2
        offset = index - previous
        return BOARD_WIDTH - offset - 1 + BOARD_HEIGHT + BOARD_WIDTH - 2

    def render(self, use_color: bool = False) -> str:
        """Draw the whole board as text."""
        boxes = [
            self.field(self.display_index(slot)).printable()
            for slot in range(self.number_of_fields)
        ]
        rows = self._render_row(boxes, 0, use_color)
        slot = BOARD_WIDTH
        for _ in range(BOARD_HEIGHT - 2):
            rows.extend(self._render_sides(boxes, slot, use_color))
            slot += 2
        rows.extend(self._render_row(boxes, slot, use_color))
        return "\n".join(rows) + "\n"

    @staticmethod
    def _render_row(boxes: list[PrintableField], start: int, use_color: bool) -> list[str]:
        row = boxes[start:start + BOARD_WIDTH]
        return [
            "".join(box.render_line(line, use_color) for box in row)
            for line in _LINE_NUMBERS
        ]

    @staticmethod
    def _render_sides(boxes: list[PrintableField], start: int, use_color: bool) -> list[str]:
        left, right = boxes[start], boxes[start + 1]
        middle = " " * ((FIELD_WIDTH + 2) * (BOARD_WIDTH - 2))
        return [
            left.render_line(line, use_color) + middle + right.render_line(line, use_color)
            for line in _LINE_NUMBERS
        ]