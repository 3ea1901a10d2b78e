"""A Spanish crossword tile game on a 15x15 board, with a pygame window."""

__version__ = "0.1.0"