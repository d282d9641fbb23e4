"""The interactive game loop and its command-line entry point."""

import argparse
import sys

from .bank import Bank
from .board import Board
from .colors import colorize, player_color
from .commands import CommandError, CommandExecutor, Console
from .config import SAVE_FILE_PATH
from .dice import Dice

_CLEAR_SCREEN = "\x1b[2J\x1b[H"


class Monopoly:
    """Reads commands, runs them and redraws the board after each one."""

    def __init__(self, board: Board, console: Console, dice: Dice, use_color: bool = True):
        self.board = board
        self.console = console
        self.dice = dice
        self.use_color = use_color
        self.bank = Bank()
        self.executor = CommandExecutor(board, self.bank, console, dice)

    def main_menu(self) -> str:
        return (
            "Welcome to MonOOpoly\n"
            "\n"
            "Please select an option\n"
            "start <player count> - Start a new game with 2 - 6 players\n"
            "load - Load game from save file\n"
        )

    def clear_console(self) -> None:
        self.console.write(_CLEAR_SCREEN)

    def turn_message(self) -> str:
        """Whose turn it is and what they can do; empty before a game starts."""
        if not self.board.players:
            return ""
        player = self.board.active_player()
        name = player.name
        if self.use_color:
            name = colorize(name, player_color(player.index))
        return (
            f"Player {name}'s turn\n"
            f"Current position: {player.current_field_index}\n"
            "Valid commands: \n"
            "roll - roll the dice and move forward\n"
            "trade <player name> <property index> <value> - offer to sell property to player\n"
        )

    def run(self) -> None:
        """Play until the game is over or input runs out."""
        self.console.write(self.main_menu())
        while not self.board.is_game_over:
            try:
                name = self.console.read_token()
                failed = False
                try:
                    self.executor.execute(name)
                except CommandError as error:
                    self.console.write(f"{error}\n")
                    self.console.skip_line()
                    failed = True
            except EOFError:
                return
            if not failed:
                self.clear_console()
            self.console.write(self.board.render(self.use_color))
            self.console.write(self.turn_message())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="monoopoly", description="Play MonOOpoly.")
    parser.add_argument("--fields", default=SAVE_FILE_PATH, help="board file to load")
    parser.add_argument("--no-color", action="store_true", help="disable coloured output")
    args = parser.parse_args(argv)

    try:
        board = Board(args.fields)
    except (OSError, ValueError) as error:
        print(f"Cannot load board: {error}", file=sys.stderr)
        return 1

    console = Console(sys.stdin, sys.stdout)
    Monopoly(board, console, Dice(), use_color=not args.no_color).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())