"""A player: a rack of tiles and a score."""

from __future__ import annotations

from collections.abc import Iterable

from letras.bag import Bag
from letras.tile import SIZE as TILE_SIZE
from letras.tile import Tile
from letras.widgets import ScoreBox

MAX_TILES = 7


class Player:
    """Holds up to seven tiles and a running score."""

    def __init__(self) -> None:
        self.tiles: list[Tile] = []
        self.score_box = ScoreBox()

    @property
    def score(self) -> int:
        return self.score_box.value

    def replenish(self, bag: Bag) -> None:
        """Draw tiles until the rack is full or the bag runs out."""
        needed = min(MAX_TILES - len(self.tiles), len(bag))
        self.tiles.extend(bag.take_one() for _ in range(max(needed, 0)))

    def handle_click(self, pos, is_exchanging: bool) -> None:
        for tile in self.tiles:
            tile.handle_click(pos, is_exchanging)

    def take_selected(self) -> Tile | None:
        """Remove and return the first selected tile, unselected, or None."""
        for index, tile in enumerate(self.tiles):
            if tile.selected:
                del self.tiles[index]
                tile.selected = False
                return tile
        return None

    def add_score(self, points: int) -> None:
        self.score_box.add(points)

    def take_all(self, tiles: Iterable[Tile]) -> None:
        """Put tiles back on the rack, the last given first."""
        self.tiles.extend(reversed(list(tiles)))

    def unselect_all(self) -> None:
        for tile in self.tiles:
            tile.selected = False

    def exchange(self, bag: Bag) -> None:
        """Swap the selected tiles for new ones drawn from the bag."""
        to_exchange = [tile for tile in self.tiles if tile.selected]
        if len(to_exchange) > len(bag):
            raise ValueError("not enough tiles in the bag to exchange")
        self.tiles = [tile for tile in self.tiles if not tile.selected]
        while len(self.tiles) < MAX_TILES and len(bag):
            self.tiles.append(bag.take_one())
        for tile in to_exchange:
            tile.selected = False
            bag.put_back(tile)

    def draw(self, surface, font, is_active: bool, base_pos) -> None:
        x, y = base_pos
        if is_active:
            for index, tile in enumerate(self.tiles):
                tile.draw(surface, font, (x + index * TILE_SIZE, y), True)
        self.score_box.draw(surface, font, (x, y + TILE_SIZE + 10))