"""Clickable buttons, score boxes and the wildcard letter picker."""

from __future__ import annotations

import pygame

from letras.bag import INITIAL_QUANTITIES
from letras.basic import BLACK, WHITE, YELLOW, ClickEvent
from letras.tile import SIZE as TILE_SIZE
from letras.tile import Tile

HEIGHT = 50
GRID_SIZE = 6


def _draw_box(surface, font, base_pos, label: str, fill) -> pygame.Rect:
    x, y = base_pos
    text = font.render(label, True, BLACK)
    box = pygame.Rect(int(x), int(y), text.get_width() + 30, HEIGHT)
    pygame.draw.rect(surface, fill, box)
    outline = box.inflate(2, 2)
    pygame.draw.rect(surface, BLACK, outline, 1)
    return outline, text


class Button:
    """A labelled button that remembers where it was last drawn."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pressed = False
        self.rect = pygame.Rect(0, 0, 0, 0)

    def handle_click(self, pos, event: ClickEvent) -> bool:
        """Return True if the click falls on the button, updating its pressed state."""
        if self.rect.collidepoint(pos):
            self.pressed = event is ClickEvent.CLICK_START
            return True
        return False

    def draw(self, surface, font, base_pos, is_selected: bool) -> None:
        fill = YELLOW if self.pressed or is_selected else WHITE
        self.rect, text = _draw_box(surface, font, base_pos, self.text, fill)
        x, y = base_pos
        surface.blit(text, (x + 15, y + 10))


class ScoreBox:
    """A running score shown in a box."""

    def __init__(self) -> None:
        self.value = 0

    def add(self, points: int) -> None:
        self.value += points

    def draw(self, surface, font, base_pos) -> None:
        _, text = _draw_box(surface, font, base_pos, f"Puntaje: {self.value}", WHITE)
        x, y = base_pos
        surface.blit(text, (x + 10, y + 10))


class WildcardPicker:
    """A grid of every letter, from which a wildcard's letter is chosen."""

    def __init__(self) -> None:
        self.tiles = [Tile(letter) for letter in INITIAL_QUANTITIES if letter]

    def handle_click(self, pos, event: ClickEvent) -> str | None:
        """The letter of the tile under the click, or None."""
        allow_multiple = event is ClickEvent.CLICK_END
        for tile in self.tiles:
            if tile.handle_click(pos, allow_multiple):
                tile.selected = False
                return tile.letter
        return None

    def draw(self, surface, font, base_pos) -> None:
        x, y = base_pos
        for index, tile in enumerate(self.tiles):
            row, column = divmod(index, GRID_SIZE)
            tile.draw(surface, font, (x + column * TILE_SIZE, y + row * TILE_SIZE), False)