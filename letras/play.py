"""A play: the tiles tentatively placed in one turn."""

from __future__ import annotations

import enum

from letras.basic import Coords, Placement


class Direction(enum.Enum):
    VERTICAL = enum.auto()
    HORIZONTAL = enum.auto()


class Play:
    """Collects a board's tentative placements and works out their line.

    ``moving_coord_values`` holds the sorted distinct positions along the line;
    ``fixed_coord_value`` is the row (horizontal) or column (vertical) shared by all.
    """

    def __init__(self, board) -> None:
        self.placements: list[Placement] = list(board.placements())
        self.direction = Direction.HORIZONTAL
        self.fixed_coord_value = 0
        self.moving_coord_values: tuple[int, ...] = ()
        self.is_first = False
        self.score = 0
        self.is_valid = False
        self.placement_map: dict[Coords, str] = {}
        self.complete_map: dict[Coords, str] = {}

        for placement in self.placements:
            self.placement_map.setdefault(placement.coord, placement.letter)
            self.complete_map.setdefault(placement.coord, placement.letter)

        self.all_i: tuple[int, ...] = tuple(sorted({p.coord[0] for p in self.placements}))
        self.all_j: tuple[int, ...] = tuple(sorted({p.coord[1] for p in self.placements}))

        if len(self.all_i) == 1:
            self.direction = Direction.HORIZONTAL
            self.fixed_coord_value = self.all_i[0]
            self.moving_coord_values = self.all_j
        elif len(self.all_j) == 1:
            self.direction = Direction.VERTICAL
            self.fixed_coord_value = self.all_j[0]
            self.moving_coord_values = self.all_i
        else:
            return
        self.is_valid = True

    def coords_at(self, moving_coord: int) -> Coords:
        """Board coordinates of a position along the play's line."""
        if self.direction is Direction.VERTICAL:
            return (moving_coord, self.fixed_coord_value)
        return (self.fixed_coord_value, moving_coord)