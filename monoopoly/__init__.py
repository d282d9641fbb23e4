"""A console Monopoly-style board game: board, fields, players, dice and game loop."""

__version__ = "0.1.0"