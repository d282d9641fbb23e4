# monoopoly

A small Monopoly-style board game played in the terminal by two to six
players taking turns at one keyboard.

## Installing

```
pip install .
```

## Playing

The board layout is read from a fields file, `Fields.txt` in the current
directory by default. Start the game with:

```
monoopoly
```

Options:

- `--fields PATH`: load the board from another fields file.
- `--no-color`: draw the board and player names without colour codes.

If the fields file is missing or malformed, the command prints
`Cannot load board: ...` and exits with status 1.

Commands are typed as words separated by whitespace:

- `start <player count>`: start a game with 2 to 6 players; you are then
  asked for each player's name (one word each).
- `roll`: roll two dice and move the active player forward.

Any other word prints `Please enter a valid command` and drops the rest of
that input line. After each successful command the screen is cleared; after
every command the board and the active player's turn message are drawn.
The game runs until input ends.

On a roll:

- Landing on an unowned property offers to buy it (`y` to buy, anything else
  to pass) when the player can afford it; otherwise a message says there is
  not enough money. Each player starts with 1500$.
- Rolling a pair grants another roll. A pair on the third roll in a row
  prints `CHEATER! You go to jail` and ends the rolling.
- Moving past the last square wraps around to the start.

Owned properties are drawn in their owner's colour, showing the rent
instead of the price, and each player's name is shown in the same colour on
their turn.

## What the game does not do

This is an early, partial game. It does not:

- load or save games (the main menu lists `load`, but it is not a command);
- trade properties (the turn message lists `trade`, but it is not a command);
- charge rent, build cottages or castles, or draw cards (a card square only
  prints `Draw card`);
- send anyone to jail: neither the `Go To Jail` square nor the third pair
  moves the player;
- end the game or declare a winner.

## Fields file

The file holds one entry per board square, in order, separated by
whitespace. Each entry starts with a type number:

| Type | Square      | Extra values                                                   |
|------|-------------|----------------------------------------------------------------|
| 0    | Property    | name, color, price, rent, cottage price, castle price          |
| 1    | Start       | none                                                           |
| 2    | Draw Card   | none                                                           |
| 3    | Go To Jail  | none                                                           |
| 4    | Jail        | none                                                           |
| 5    | Parking     | none                                                           |

Names and colours are single words. The board is 9 squares wide and 5 high,
24 squares in all, numbered clockwise from the top left corner.

## Using it as a library

```python
from monoopoly.bank import Bank
from monoopoly.board import Board
from monoopoly.fields import PropertyField

board = Board("Fields.txt")
board.set_players(["Ann", "Bob"])
print(board.render(False))

player = board.active_player()
field = board.field(player.move_by(3))
if isinstance(field, PropertyField):
    bought = Bank().buy_property(field, player)  # False if too expensive
```

`monoopoly.board.parse_fields(text, count)` reads fields from a string and
raises `ValueError` on short or malformed data. `monoopoly.game.Monopoly`
runs the interactive loop over any `monoopoly.commands.Console`, which can be
given other input and output streams.

## Running the tests

```
pip install .[test]
pytest
```