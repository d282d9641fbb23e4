"""The fields that make up the board."""

from enum import IntEnum

from .colors import player_color
from .printable import PrintableField


class FieldType(IntEnum):
    """Kinds of field, numbered as in the board file."""

    PROPERTY = 0
    START = 1
    CARD = 2
    GO_TO_JAIL = 3
    JAIL = 4
    PARKING = 5


class Field:
    """A field on the board with a position, a kind and a name."""

    def __init__(self, index: int, type: FieldType, name: str):
        self.index = index
        self.type = type
        self.name = name

    def printable(self) -> PrintableField:
        """Text box showing a blank line, the name and the index."""
        printable = PrintableField()
        printable.set_line(0, "")
        printable.set_line(1, self.name)
        printable.set_line(2, str(self.index))
        return printable

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index!r}, name={self.name!r})"


class StartField(Field):
    def __init__(self, index: int):
        super().__init__(index, FieldType.START, "Start")


class CardField(Field):
    def __init__(self, index: int):
        super().__init__(index, FieldType.CARD, "Draw Card")


class GoToJailField(Field):
    def __init__(self, index: int):
        super().__init__(index, FieldType.GO_TO_JAIL, "Go To Jail")


class JailField(Field):
    def __init__(self, index: int):
        super().__init__(index, FieldType.JAIL, "Jail")


class ParkingField(Field):
    def __init__(self, index: int):
        super().__init__(index, FieldType.PARKING, "Parking")


class PropertyField(Field):
    """A property that can be bought and earns rent."""

    def __init__(
        self,
        index: int,
        name: str,
        color: str,
        price: int,
        default_rent: int,
        cottage_price: int,
        castle_price: int,
    ):
        super().__init__(index, FieldType.PROPERTY, name)
        self.color = color
        self.price = price
        self.default_rent = default_rent
        self.cottage_price = cottage_price
        self.castle_price = castle_price
        self.owner = None

    def printable(self) -> PrintableField:
        """Price (or rent once owned), colour group and name, and index."""
        printable = PrintableField()
        if self.owner is not None:
            printable.color = player_color(self.owner.index)
        amount = self.price if self.owner is None else self.default_rent
        printable.set_line(0, f"{amount}$")
        printable.set_line(1, f"{self.color} {self.name}")
        printable.set_line(2, str(self.index))
        return printable