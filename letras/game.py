"""Game state, turn handling and the window loop."""

from __future__ import annotations

import argparse
import os

import pygame

from letras.bag import Bag
from letras.basic import WHITE, ClickEvent, Coords
from letras.board import Board
from letras.dictionary import Dictionary
from letras.play import Play
from letras.player import Player
from letras.rules import PlayBuilder, RuleViolation
from letras.widgets import Button, WildcardPicker

MIN_PLAYERS = 2
MAX_PLAYERS = 4
DEFAULT_DICTIONARY = os.path.join("res", "dict", "fise-2.txt")
WINDOW_SIZE = (1200, 800)


class Game:
    """A match between two to four players sharing one board and bag."""

    def __init__(self, n_players: int, dictionary_path=DEFAULT_DICTIONARY) -> None:
        if not MIN_PLAYERS <= n_players <= MAX_PLAYERS:
            raise ValueError(f"players must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
        self.players = [Player() for _ in range(n_players)]
        self.current_player = 0
        self.is_exchanging = False
        self.is_picking_wildcard = False
        self.pending_wildcard: Coords | None = None
        self.board = Board()
        self.bag = Bag()
        self.play_button = Button("JUGAR")
        self.cancel_button = Button("CANCELAR")
        self.exchange_button = Button("CAMBIAR")
        self.dictionary = Dictionary(dictionary_path)
        self.play_builder = PlayBuilder(self.dictionary)
        self.wildcard_picker = WildcardPicker()
        self.last_violation: RuleViolation | None = None

    @property
    def player(self) -> Player:
        return self.players[self.current_player]

    def replenish_all(self) -> None:
        for player in self.players:
            player.replenish(self.bag)

    def next_player(self) -> None:
        self.current_player = (self.current_player + 1) % len(self.players)

    def _play(self) -> None:
        play = Play(self.board)
        try:
            self.play_builder.build(play, self.board)
        except RuleViolation as violation:
            self.last_violation = violation
            print(f"Failed rule {violation.rule}, reason: {violation.reason}")
            return
        self.last_violation = None
        self.board.accept_placements()
        self.player.add_score(play.score)
        self.player.replenish(self.bag)
        self.next_player()

    def _toggle_exchange(self) -> None:
        if self.is_exchanging:
            try:
                self.player.exchange(self.bag)
            except ValueError as error:
                print(f"Exchange failed: {error}")
                self.player.unselect_all()
            else:
                self.next_player()
        self.is_exchanging = not self.is_exchanging

    def _cancel(self) -> None:
        if self.is_exchanging:
            self.is_exchanging = False
            self.player.unselect_all()
        else:
            self.player.take_all(self.board.return_placements())

    def handle_click(self, pos, event: ClickEvent) -> None:
        released = event is ClickEvent.CLICK_END
        if not self.is_exchanging and self.play_button.handle_click(pos, event) and released:
            self._play()
        if self.exchange_button.handle_click(pos, event) and released:
            self._toggle_exchange()
        if self.cancel_button.handle_click(pos, event) and released:
            self._cancel()
        if event is not ClickEvent.CLICK_START:
            return

        if self.is_picking_wildcard:
            letter = self.wildcard_picker.handle_click(pos, event)
            if letter is not None:
                self.board.assume_letter(self.pending_wildcard, letter)
                self.pending_wildcard = None
                self.is_picking_wildcard = False
                return

        if not self.is_exchanging:
            coords = self.board.should_handle_click(pos)
            if coords is not None:
                if self.board.can_take_tile(pos):
                    selected = self.player.take_selected()
                    if selected is not None:
                        self.board.place_temp(pos, selected)
                        if selected.is_wildcard():
                            self.pending_wildcard = coords
                            self.is_picking_wildcard = True
                return
        self.player.handle_click(pos, self.is_exchanging)

    def draw(self, surface, font) -> None:
        self.board.draw(surface, font)
        self.play_button.draw(surface, font, (800, 600), False)
        self.cancel_button.draw(surface, font, (950, 600), False)
        self.exchange_button.draw(surface, font, (800, 680), self.is_exchanging)
        self.bag.draw(surface, font, (950, 680))
        for index, player in enumerate(self.players):
            player.draw(surface, font, index == self.current_player, (800, 100 + 140 * index))
        if self.is_picking_wildcard:
            self.wildcard_picker.draw(surface, font, (400, 300))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="letras", description="Spanish word board game.")
    parser.add_argument("--players", type=int, default=2, help="number of players (2-4)")
    parser.add_argument("--dictionary", default=DEFAULT_DICTIONARY, help="word list, one per line")
    parser.add_argument("--font", default=None, help="path of a TrueType font")
    args = parser.parse_args(argv)

    game = Game(args.players, args.dictionary)
    game.replenish_all()

    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Letras")
        font = pygame.font.Font(args.font, 24)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.handle_click(event.pos, ClickEvent.CLICK_START)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    game.handle_click(event.pos, ClickEvent.CLICK_END)
            window.fill(WHITE)
            game.draw(window, font)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0