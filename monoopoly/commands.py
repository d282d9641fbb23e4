"""Player commands and the executor that dispatches them."""

import sys
from collections import deque

from .config import MAX_PLAYERS, MIN_PLAYERS
from .dice import Dice
from .fields import FieldType


class CommandError(Exception):
    """A command could not be carried out; the message is shown to the player."""


class Console:
    """Token-oriented input and plain output for the game."""

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def read_token(self) -> str:
        """Next whitespace-separated word; raises EOFError when input ends."""
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def skip_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pending.clear()

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()


class Command:
    """An action a player can take."""

    def run(self, board, bank, console) -> None:
        raise NotImplementedError


class StartNewGameCommand(Command):
    """Read a player count and names and seat the players."""

    def run(self, board, bank, console) -> None:
        token = console.read_token()
        try:
            player_count = int(token)
        except ValueError:
            raise CommandError("Invalid input") from None
        if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
            raise CommandError("Please enter a valid player count!")
        names = []
        for number in range(1, player_count + 1):
            console.write(f"Enter Player {number} name: ")
            names.append(console.read_token())
        board.set_players(names)


class MoveForwardCommand(Command):
    """Roll the dice for the active player and resolve where they land."""

    def __init__(self, dice: Dice):
        self.dice = dice

    def run(self, board, bank, console) -> None:
        if not board.players:
            raise CommandError("Start a new game first")
        self._roll(board, bank, console, board.active_player(), 1)

    def _roll(self, board, bank, console, player, roll_number: int) -> None:
        first, second = self.dice.roll_pair()
        console.write(f"Dice rolls: {first} {second}\n")
        is_pair = first == second

        if roll_number >= 3 and is_pair:
            console.write("CHEATER! You go to jail\n")
            return

        position = player.move_by(first + second)
        field = board.field(position)
        console.write(f"You landed on field: {field.name} ({field.index})\n")

        if field.type is FieldType.PROPERTY:
            self._land_on_property(bank, console, player, field)
        elif field.type is FieldType.CARD:
            console.write("Draw card")

        if is_pair:
            console.write("You rolled a pair you get another roll!\n")
            self._roll(board, bank, console, player, roll_number + 1)

        if roll_number == 1:
            board.active_player_index += 1

    @staticmethod
    def _land_on_property(bank, console, player, field) -> None:
        if field.owner is not None:
            return
        if player.balance < field.price:
            console.write("Not enough money to buy property\n")
            console.write("Type anything to continue\n")
            console.read_token()
            return
        console.write(f"Do you wanna buy property for {field.price}$? \n")
        console.write("y - yes buy property\n")
        console.write("n - dont buy property\n")
        if console.read_token() != "y":
            return
        bank.buy_property(field, player)
        console.write(f"Property bought successfuly for {field.price}$\n")
        console.write(f"New balance: {player.balance}$\n")
        console.write("Type anything to continue\n")
        console.read_token()


class CommandExecutor:
    """Maps command names to commands and runs them."""

    def __init__(self, board, bank, console, dice):
        self.board = board
        self.bank = bank
        self.console = console
        self._commands = {
            "start": StartNewGameCommand(),
            "roll": MoveForwardCommand(dice),
        }

    def execute(self, name: str) -> None:
        """Run the named command; raises CommandError for unknown names."""
        command = self._commands.get(name)
        if command is None:
            raise CommandError("Please enter a valid command")
        command.run(self.board, self.bank, self.console)