import pygame

from letras.square import Effect, Square, SquareDefinition
from letras.tile import SIZE, Tile


def plain():
    return Square(SquareDefinition(Effect.NONE, 0))


def test_empty_square():
    square = plain()
    assert not square.is_occupied()
    assert not square.is_tile_temp()
    assert square.letter() is None
    assert square.tile_base_score() is None
    assert square.remove_tile() is None


def test_place_marks_temporary():
    square = plain()
    tile = Tile("Q")
    square.place(tile)
    assert square.is_occupied()
    assert square.is_tile_temp()
    assert square.letter() == "Q"
    assert square.tile_base_score() == tile.base_score


def test_accepted_tile_no_longer_temporary():
    square = plain()
    square.place(Tile("A"))
    square.tile_is_temp = False
    assert square.is_occupied()
    assert not square.is_tile_temp()


def test_remove_tile_returns_it():
    square = plain()
    tile = Tile("RR")
    square.place(tile)
    assert square.remove_tile() is tile
    assert not square.is_occupied()
    assert not square.is_tile_temp()


def test_assumed_letter_only_for_wildcards():
    square = plain()
    square.place(Tile(""))
    square.set_tile_assumed_letter("S")
    assert square.letter() == "S"

    other = plain()
    other.place(Tile("M"))
    other.set_tile_assumed_letter("S")
    assert other.letter() == "M"


def test_definition_kept():
    definition = SquareDefinition(Effect.WORD_MULTIPLIER, 3)
    assert Square(definition).definition == definition


def test_draw_uses_premium_colour():
    surface = pygame.Surface((200, 200))
    Square(SquareDefinition(Effect.LETTER_MULTIPLIER, 2)).draw(surface, None, (10, 10))
    Square(SquareDefinition(Effect.WORD_MULTIPLIER, 3)).draw(surface, None, (100, 10))
    assert surface.get_at((10 + SIZE // 2, 10 + SIZE // 2))[:3] == (124, 199, 232)
    assert surface.get_at((100 + SIZE // 2, 10 + SIZE // 2))[:3] == (169, 31, 31)