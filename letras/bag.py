"""The bag of undrawn tiles."""

from __future__ import annotations

import random

import pygame

from letras.basic import BLACK, WHITE
from letras.tile import Tile

HEIGHT = 50

INITIAL_QUANTITIES: dict[str, int] = {
    "": 2,
    "A": 12,
    "B": 2,
    "C": 4,
    "CH": 1,
    "D": 5,
    "E": 12,
    "F": 1,
    "G": 2,
    "H": 2,
    "I": 6,
    "J": 1,
    "L": 4,
    "LL": 1,
    "M": 2,
    "N": 5,
    "O": 9,
    "P": 2,
    "Q": 1,
    "R": 5,
    "RR": 1,
    "S": 6,
    "T": 4,
    "U": 5,
    "V": 1,
    "X": 1,
    "Y": 1,
    "Z": 1,
    "Ñ": 1,
}


class Bag:
    """Holds the tiles not yet drawn, handing them out at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._tiles = [
            Tile(letter)
            for letter, quantity in INITIAL_QUANTITIES.items()
            for _ in range(quantity)
        ]

    def __len__(self) -> int:
        return len(self._tiles)

    def take_one(self) -> Tile:
        """Remove and return a random tile."""
        if not self._tiles:
            raise IndexError("the bag is empty")
        pos = self._rng.randrange(len(self._tiles))
        self._tiles[pos], self._tiles[-1] = self._tiles[-1], self._tiles[pos]
        return self._tiles.pop()

    def put_back(self, tile: Tile) -> None:
        self._tiles.append(tile)

    def draw(self, surface, font, base_pos) -> None:
        x, y = base_pos
        text = font.render(f"Bolsa: {len(self)}", True, BLACK)
        box = pygame.Rect(int(x), int(y), text.get_width() + 30, HEIGHT)
        pygame.draw.rect(surface, WHITE, box)
        pygame.draw.rect(surface, BLACK, box.inflate(2, 2), 1)
        surface.blit(text, (x + 10, y + 10))