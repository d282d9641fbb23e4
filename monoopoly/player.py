"""A player of the game."""

from .config import NUMBER_OF_FIELDS, STARTING_MONEY


class Player:
    """A player with a position on the board and a balance."""

    def __init__(self, index: int, name: str):
        self.index = index
        self.name = name
        self.is_resigned = False
        self._balance = STARTING_MONEY
        self._current_field_index = 0

    @property
    def current_field_index(self) -> int:
        return self._current_field_index

    @current_field_index.setter
    def current_field_index(self, value: int) -> None:
        value = max(value, 0)
        if value >= NUMBER_OF_FIELDS:
            value %= NUMBER_OF_FIELDS
        self._current_field_index = value

    @property
    def balance(self) -> int:
        return self._balance

    @balance.setter
    def balance(self, value: int) -> None:
        self._balance = max(value, 0)

    def move_by(self, steps: int) -> int:
        """Move forward around the board and return the new position."""
        self.current_field_index += steps
        return self.current_field_index

    def __repr__(self) -> str:
        return (
            f"Player(index={self.index!r}, name={self.name!r}, "
            f"balance={self.balance!r}, position={self.current_field_index!r})"
        )