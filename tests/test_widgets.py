import pygame
import pytest

from letras.bag import INITIAL_QUANTITIES
from letras.basic import ClickEvent
from letras.widgets import Button, ScoreBox, WildcardPicker


class FakeFont:
    def render(self, text, antialias, colour):
        return pygame.Surface((10 * max(1, len(text)), 20))


@pytest.fixture
def surface():
    return pygame.Surface((1200, 800))


def test_button_press_and_release():
    button = Button("JUGAR")
    button.rect = pygame.Rect(800, 600, 100, 50)
    assert button.handle_click((810, 610), ClickEvent.CLICK_START) is True
    assert button.pressed is True
    assert button.handle_click((810, 610), ClickEvent.CLICK_END) is True
    assert button.pressed is False


def test_button_click_outside_is_ignored():
    button = Button("JUGAR")
    button.rect = pygame.Rect(800, 600, 100, 50)
    button.pressed = True
    assert button.handle_click((10, 10), ClickEvent.CLICK_END) is False
    assert button.pressed is True


def test_button_undrawn_takes_no_clicks():
    button = Button("CANCELAR")
    assert button.handle_click((0, 0), ClickEvent.CLICK_START) is False


def test_button_draw_sets_clickable_area(surface):
    button = Button("CAMBIAR")
    button.draw(surface, FakeFont(), (800, 680), False)
    assert button.handle_click((805, 690), ClickEvent.CLICK_START) is True
    assert button.handle_click((700, 690), ClickEvent.CLICK_START) is False


def test_score_box_accumulates():
    box = ScoreBox()
    assert box.value == 0
    box.add(5)
    box.add(3)
    assert box.value == 8


def test_score_box_draw_keeps_value(surface):
    box = ScoreBox()
    box.add(4)
    box.draw(surface, FakeFont(), (800, 160))
    assert box.value == 4


def test_picker_offers_every_non_wildcard_letter():
    picker = WildcardPicker()
    letters = [tile.letter for tile in picker.tiles]
    assert "" not in letters
    assert set(letters) == set(INITIAL_QUANTITIES) - {""}
    assert "Ñ" in letters and "CH" in letters


def test_picker_returns_clicked_letter():
    picker = WildcardPicker()
    picker.tiles[2].rect = pygame.Rect(400, 300, 50, 50)
    assert picker.handle_click((410, 310), ClickEvent.CLICK_START) == picker.tiles[2].letter
    assert not any(tile.selected for tile in picker.tiles)


def test_picker_miss_returns_none():
    picker = WildcardPicker()
    assert picker.handle_click((5, 5), ClickEvent.CLICK_START) is None


def test_picker_draw_lays_out_grid(surface):
    picker = WildcardPicker()
    picker.draw(surface, FakeFont(), (400, 300))
    assert picker.handle_click((425, 325), ClickEvent.CLICK_START) == picker.tiles[0].letter
    assert picker.handle_click((425, 375), ClickEvent.CLICK_START) == picker.tiles[6].letter