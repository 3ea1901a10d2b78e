"""Letter tiles."""

from __future__ import annotations

import pygame

from letras.basic import BLACK, BLUE, WHITE, YELLOW

SIZE = 50

BASE_SCORES: dict[str, int] = {
    "": 0,
    "A": 1,
    "B": 3,
    "C": 3,
    "CH": 5,
    "D": 2,
    "E": 1,
    "F": 4,
    "G": 2,
    "H": 4,
    "I": 1,
    "J": 8,
    "L": 1,
    "LL": 8,
    "M": 3,
    "N": 1,
    "O": 1,
    "P": 3,
    "Q": 5,
    "R": 1,
    "RR": 8,
    "S": 1,
    "T": 1,
    "U": 1,
    "V": 4,
    "X": 8,
    "Y": 4,
    "Z": 10,
    "Ñ": 8,
}


class Tile:
    """A tile carrying a letter; the empty letter marks a wildcard."""

    def __init__(self, letter: str) -> None:
        if letter not in BASE_SCORES:
            raise ValueError(f"unknown tile letter: {letter!r}")
        self.letter = letter
        self.base_score = BASE_SCORES[letter]
        self.selected = False
        self.assumed_letter = ""
        self.rect = pygame.Rect(0, 0, 0, 0)

    def __repr__(self) -> str:
        return f"Tile({self.letter!r})"

    def is_wildcard(self) -> bool:
        return self.letter == ""

    def shown_letter(self) -> str:
        """The letter the tile stands for, honouring a wildcard's choice."""
        if self.is_wildcard() and self.assumed_letter:
            return self.assumed_letter
        return self.letter

    def set_assumed_letter(self, letter: str) -> None:
        if self.is_wildcard():
            self.assumed_letter = letter

    def handle_click(self, pos, allow_multiple: bool) -> bool:
        """Toggle selection when clicked; otherwise deselect unless multiple are allowed."""
        if self.rect.collidepoint(pos):
            self.selected = not self.selected
            return True
        if not allow_multiple:
            self.selected = False
        return False

    def draw(self, surface, font, base_pos, show_score: bool) -> None:
        x, y = base_pos
        body = pygame.Rect(int(x), int(y), SIZE, SIZE)
        self.rect = body.inflate(2, 2)
        pygame.draw.rect(surface, YELLOW if self.selected else WHITE, body)
        pygame.draw.rect(surface, BLACK, self.rect, 1)

        colour = BLUE if self.is_wildcard() and self.assumed_letter else BLACK
        surface.blit(font.render(self.shown_letter(), True, colour), (x + 15, y + 10))

        if show_score:
            text = font.render(str(self.base_score), True, BLACK)
            width = max(1, round(text.get_width() * 16 / 24))
            height = max(1, round(text.get_height() * 16 / 24))
            surface.blit(pygame.transform.scale(text, (width, height)), (x + 35, y + 30))