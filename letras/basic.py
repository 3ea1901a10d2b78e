"""Small value types and colours shared across the game."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Coords = tuple[int, int]

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
BLUE = (0, 0, 255)


@dataclass(frozen=True)
class Placement:
    """A letter placed on the board at a (row, column) position."""

    coord: Coords
    letter: str


class ClickEvent(enum.Enum):
    """Phase of a mouse click."""

    CLICK_START = enum.auto()
    CLICK_END = enum.auto()