"""Board squares and their premium effects."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import pygame

from letras.basic import BLACK, WHITE
from letras.tile import SIZE, Tile


class Effect(enum.Enum):
    NONE = enum.auto()
    LETTER_MULTIPLIER = enum.auto()
    WORD_MULTIPLIER = enum.auto()


@dataclass(frozen=True)
class SquareDefinition:
    """The fixed premium of a square."""

    effect: Effect
    value: int


_BACKGROUNDS = {
    (Effect.LETTER_MULTIPLIER, True): (124, 199, 232),
    (Effect.LETTER_MULTIPLIER, False): (56, 92, 217),
    (Effect.WORD_MULTIPLIER, True): (255, 184, 196),
    (Effect.WORD_MULTIPLIER, False): (169, 31, 31),
}


class Square:
    """A board square that may hold a tile, temporarily or for good."""

    def __init__(self, definition: SquareDefinition) -> None:
        self.definition = definition
        self.tile: Tile | None = None
        self.tile_is_temp = False

    def is_occupied(self) -> bool:
        return self.tile is not None

    def is_tile_temp(self) -> bool:
        return self.tile is not None and self.tile_is_temp

    def letter(self) -> str | None:
        """The letter shown by the tile here, or None if empty."""
        if self.tile is None:
            return None
        return self.tile.shown_letter()

    def place(self, tile: Tile) -> None:
        self.tile = tile
        self.tile_is_temp = True

    def tile_base_score(self) -> int | None:
        if self.tile is None:
            return None
        return self.tile.base_score

    def remove_tile(self) -> Tile | None:
        tile, self.tile = self.tile, None
        return tile

    def set_tile_assumed_letter(self, letter: str) -> None:
        if self.tile is not None and self.tile.is_wildcard():
            self.tile.set_assumed_letter(letter)

    def draw(self, surface, font, base_pos) -> None:
        x, y = base_pos
        body = pygame.Rect(int(x), int(y), SIZE, SIZE)
        if self.definition.effect is Effect.NONE:
            background = WHITE
        else:
            background = _BACKGROUNDS[(self.definition.effect, self.definition.value == 2)]
        pygame.draw.rect(surface, background, body)
        pygame.draw.rect(surface, BLACK, body.inflate(2, 2), 1)
        if self.tile is not None:
            self.tile.draw(surface, font, base_pos, True)