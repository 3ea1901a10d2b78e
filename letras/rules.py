"""Rules a play must satisfy, and the builder that applies them in order."""

from __future__ import annotations

from abc import ABC, abstractmethod

from letras.board import CENTER
from letras.dictionary import Dictionary
from letras.play import Play
from letras.square import Effect


class RuleViolation(Exception):
    """Raised when a play breaks a rule."""

    def __init__(self, rule: str, reason: str) -> None:
        super().__init__(f"{rule}: {reason}")
        self.rule = rule
        self.reason = reason


class PlayRule(ABC):
    """A check applied to a play; it may also enrich the play with data."""

    name = "PlayRule"

    @abstractmethod
    def check(self, play: Play, board) -> None:
        """Raise RuleViolation if the play breaks this rule."""

    def _fail(self, reason: str) -> RuleViolation:
        return RuleViolation(self.name, reason)


class Contiguous(PlayRule):
    """Tiles must lie in one line without empty squares between them."""

    name = "Contiguous"

    def check(self, play: Play, board) -> None:
        if len(play.moving_coord_values) == 1:
            return
        if len(play.all_i) != 1 and len(play.all_j) != 1:
            raise self._fail("Not strictly vertical or horizontal")
        for prev, coord in zip(play.moving_coord_values, play.moving_coord_values[1:]):
            if coord != prev + 1 and board.is_square_free(play.coords_at(prev + 1)):
                raise self._fail("Not contiguous")


class FirstMove(PlayRule):
    """While the centre is empty, the play must cover it."""

    name = "FirstMove"

    def check(self, play: Play, board) -> None:
        if board.is_square_free(CENTER):
            if CENTER not in play.placement_map:
                raise self._fail("First move must occupy center square")
            play.is_first = True


class Connected(PlayRule):
    """After the first move, a play must touch tiles already on the board."""

    name = "Connected"

    def check(self, play: Play, board) -> None:
        if play.is_first:
            return
        connected = False
        for moving_coord in play.moving_coord_values:
            for step in (-1, 1):
                coords = play.coords_at(moving_coord + step)
                letter = board.tile_letter(coords)
                if letter is not None:
                    play.complete_map.setdefault(coords, letter)
                    connected = True
        if not connected:
            raise self._fail("Play doesn't use existing tiles")


class DictCheck(PlayRule):
    """The word formed along the play's line must be in the dictionary."""

    name = "DictCheck"

    def __init__(self, dictionary: Dictionary) -> None:
        self._dictionary = dictionary

    def check(self, play: Play, board) -> None:
        if not play.moving_coord_values:
            raise self._fail("No tiles placed")
        low = play.moving_coord_values[0] - 1
        high = play.moving_coord_values[-1] + 1
        word = "".join(
            play.complete_map[coords]
            for coords in map(play.coords_at, range(low, high + 1))
            if coords in play.complete_map
        ).lower()
        if not self._dictionary.is_valid(word):
            raise self._fail(f"Word {word} not found in dictionary")


class CalcScore(PlayRule):
    """Computes the play's score, applying premiums only under new tiles."""

    name = "CalcScore"

    def check(self, play: Play, board) -> None:
        score = 0
        word_multiplier = 1
        for coords in play.complete_map:
            tile_score = board.tile_base_score(coords)
            if tile_score is None:
                raise self._fail(f"No tile at {coords}")
            definition = board.square_definition(coords)
            if definition is None:
                raise self._fail(f"No square at {coords}")
            if coords in play.placement_map:
                if definition.effect is Effect.LETTER_MULTIPLIER:
                    tile_score *= definition.value
                elif definition.effect is Effect.WORD_MULTIPLIER:
                    word_multiplier *= definition.value
            score += tile_score
        play.score = score * word_multiplier


class PlayBuilder:
    """Runs every rule over a play in order, stopping at the first violation."""

    def __init__(self, dictionary: Dictionary) -> None:
        self.rules: list[PlayRule] = [
            Contiguous(),
            FirstMove(),
            Connected(),
            DictCheck(dictionary),
            CalcScore(),
        ]

    def build(self, play: Play, board) -> Play:
        """Validate and score the play; raise RuleViolation on the first failing rule."""
        for rule in self.rules:
            rule.check(play, board)
        return play