"""The 15x15 game board with its premium squares."""

from __future__ import annotations

from collections.abc import Iterator

from letras.basic import Coords, Placement
from letras.square import Effect, Square, SquareDefinition
from letras.tile import SIZE as TILE_SIZE
from letras.tile import Tile

SIZE = 15
BORDER = 20
CENTER: Coords = (SIZE // 2, SIZE // 2)

_W3 = SquareDefinition(Effect.WORD_MULTIPLIER, 3)
_W2 = SquareDefinition(Effect.WORD_MULTIPLIER, 2)
_L3 = SquareDefinition(Effect.LETTER_MULTIPLIER, 3)
_L2 = SquareDefinition(Effect.LETTER_MULTIPLIER, 2)
_PLAIN = SquareDefinition(Effect.NONE, 0)

PREMIUM_SQUARES: dict[Coords, SquareDefinition] = {
    (0, 0): _W3, (0, 3): _L2, (0, 7): _W3, (0, 11): _L2, (0, 14): _W3,
    (1, 1): _W2, (1, 5): _L3, (1, 9): _L3, (1, 13): _W2,
    (2, 2): _W2, (2, 6): _L2, (2, 8): _L2, (2, 12): _W2,
    (3, 0): _L2, (3, 3): _W2, (3, 7): _L2, (3, 11): _W2, (3, 14): _L2,
    (4, 4): _W2, (4, 10): _W2,
    (5, 1): _L3, (5, 5): _L3, (5, 9): _L3, (5, 13): _L3,
    (6, 2): _L2, (6, 6): _L2, (6, 8): _L2, (6, 12): _L2,
    (7, 0): _W3, (7, 3): _L2, (7, 7): _W2, (7, 11): _L2, (7, 14): _W3,
    (8, 2): _L2, (8, 6): _L2, (8, 8): _L2, (8, 12): _L2,
    (9, 1): _L3, (9, 5): _L3, (9, 9): _L3, (9, 13): _L3,
    (10, 4): _W2, (10, 10): _W2,
    (11, 0): _L2, (11, 3): _W2, (11, 7): _L2, (11, 11): _W2, (11, 14): _L2,
    (12, 2): _W2, (12, 6): _L2, (12, 8): _L2, (12, 12): _W2,
    (13, 1): _W2, (13, 5): _L3, (13, 9): _L3, (13, 13): _W2,
    (14, 0): _W3, (14, 3): _L2, (14, 7): _W3, (14, 11): _L2, (14, 14): _W3,
}


def _in_range(coords: Coords) -> bool:
    i, j = coords
    return 0 <= i < SIZE and 0 <= j < SIZE


def square_coords(pos) -> Coords | None:
    """Map a pixel position (x, y) to board coordinates, or None if off the board.

    Offsets are truncated toward zero, so a few pixels inside the border
    still count as the first row or column.
    """
    x, y = pos
    coords = (int((y - BORDER) / TILE_SIZE), int((x - BORDER) / TILE_SIZE))
    return coords if _in_range(coords) else None


class Board:
    """A grid of squares onto which tiles are placed, first tentatively, then for good."""

    def __init__(self) -> None:
        self._squares = [
            [Square(PREMIUM_SQUARES.get((i, j), _PLAIN)) for j in range(SIZE)]
            for i in range(SIZE)
        ]

    def _square(self, coords: Coords) -> Square | None:
        if not _in_range(coords):
            return None
        i, j = coords
        return self._squares[i][j]

    def _temp_squares(self) -> Iterator[tuple[Coords, Square]]:
        for i, row in enumerate(self._squares):
            for j, square in enumerate(row):
                if square.is_tile_temp():
                    yield (i, j), square

    def should_handle_click(self, pos) -> Coords | None:
        """Coordinates of the clicked square if it is on the board and empty."""
        coords = square_coords(pos)
        if coords is None or self._square(coords).is_occupied():
            return None
        return coords

    def can_take_tile(self, pos) -> bool:
        coords = square_coords(pos)
        return coords is not None and not self._square(coords).is_occupied()

    def place_temp(self, pos, tile: Tile) -> None:
        """Put a tile tentatively on the square under the pixel position."""
        coords = square_coords(pos)
        if coords is not None:
            self._square(coords).place(tile)

    def placements(self) -> list[Placement]:
        """The tentatively placed tiles, in row-major order."""
        return [Placement(coords, square.letter()) for coords, square in self._temp_squares()]

    def accept_placements(self) -> None:
        for _, square in self._temp_squares():
            square.tile_is_temp = False

    def is_square_free(self, coords: Coords) -> bool:
        """True when on the board and empty or holding only a tentative tile."""
        square = self._square(coords)
        if square is None:
            return False
        return not square.is_occupied() or square.is_tile_temp()

    def tile_letter(self, coords: Coords) -> str | None:
        """Letter of a permanently placed tile, or None."""
        square = self._square(coords)
        if square is None or not square.is_occupied() or square.is_tile_temp():
            return None
        return square.letter()

    def tile_base_score(self, coords: Coords) -> int | None:
        square = self._square(coords)
        if square is None:
            return None
        return square.tile_base_score()

    def square_definition(self, coords: Coords) -> SquareDefinition | None:
        square = self._square(coords)
        return None if square is None else square.definition

    def return_placements(self) -> list[Tile]:
        """Lift every tentative tile off the board, clearing wildcard choices."""
        tiles = []
        for _, square in list(self._temp_squares()):
            square.set_tile_assumed_letter("")
            tiles.append(square.remove_tile())
        return tiles

    def assume_letter(self, coords: Coords, letter: str) -> None:
        square = self._square(coords)
        if square is not None:
            square.set_tile_assumed_letter(letter)

    def draw(self, surface, font) -> None:
        for i, row in enumerate(self._squares):
            for j, square in enumerate(row):
                square.draw(surface, font, (BORDER + j * TILE_SIZE, BORDER + i * TILE_SIZE))