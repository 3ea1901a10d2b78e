from letras.basic import Placement
from letras.play import Direction, Play


class FakeBoard:
    def __init__(self, placements):
        self._placements = placements
        self.calls = 0

    def placements(self):
        self.calls += 1
        return list(self._placements)


def make_play(*pairs):
    return Play(FakeBoard([Placement(coord, letter) for coord, letter in pairs]))


def test_base_play_horizontal_build():
    board = FakeBoard(
        [
            Placement((0, 0), "H"),
            Placement((0, 1), "O"),
            Placement((0, 2), "L"),
            Placement((0, 3), "A"),
        ]
    )
    play = Play(board)

    assert board.calls == 1
    assert play.direction is Direction.HORIZONTAL
    assert play.fixed_coord_value == 0
    for value in (0, 1, 2, 3):
        assert value in play.moving_coord_values
    assert 4 not in play.moving_coord_values
    assert play.all_j == play.moving_coord_values
    assert play.placement_map == play.complete_map
    assert (0, 1) in play.placement_map
    assert play.placement_map[(0, 1)] == "O"
    assert play.is_valid


def test_base_play_vertical_build():
    play = make_play(((0, 0), "H"), ((1, 0), "O"), ((2, 0), "L"), ((3, 0), "A"))

    assert play.direction is Direction.VERTICAL
    assert play.fixed_coord_value == 0
    for value in (0, 1, 2, 3):
        assert value in play.moving_coord_values
    assert 4 not in play.moving_coord_values
    assert play.all_i == play.moving_coord_values
    assert play.placement_map == play.complete_map
    assert (1, 0) in play.placement_map
    assert play.placement_map[(1, 0)] == "O"


def test_single_tile_is_horizontal():
    play = make_play(((0, 0), "H"))
    assert play.direction is Direction.HORIZONTAL
    assert play.moving_coord_values == (0,)
    assert play.is_valid


def test_moving_values_are_sorted():
    play = make_play(((8, 9), "A"), ((8, 6), "H"), ((8, 7), "O"))
    assert play.moving_coord_values == (6, 7, 9)
    assert play.fixed_coord_value == 8


def test_scattered_play_is_not_a_line():
    play = make_play(((0, 0), "H"), ((1, 1), "O"), ((2, 2), "L"), ((3, 8), "A"))
    assert not play.is_valid
    assert play.moving_coord_values == ()
    assert play.all_i == (0, 1, 2, 3)
    assert play.all_j == (0, 1, 2, 8)


def test_duplicate_coords_keep_first_letter():
    play = make_play(((8, 7), "O"), ((8, 7), "L"), ((8, 9), "A"))
    assert play.placement_map[(8, 7)] == "O"
    assert play.complete_map[(8, 7)] == "O"
    assert play.moving_coord_values == (7, 9)
    assert len(play.placements) == 3


def test_coords_at_horizontal():
    play = make_play(((8, 6), "H"), ((8, 7), "O"))
    assert play.coords_at(5) == (8, 5)
    assert play.coords_at(8) == (8, 8)


def test_coords_at_vertical():
    play = make_play(((6, 8), "H"), ((7, 8), "O"))
    assert play.coords_at(8) == (8, 8)
    assert play.coords_at(5) == (5, 8)


def test_complete_map_is_independent_copy():
    play = make_play(((8, 6), "H"), ((8, 7), "O"), ((8, 9), "A"))
    play.complete_map[(8, 8)] = "L"
    assert (8, 8) not in play.placement_map
    assert play.complete_map[(8, 8)] == "L"


def test_defaults():
    play = make_play(((7, 7), "A"))
    assert play.score == 0
    assert play.is_first is False