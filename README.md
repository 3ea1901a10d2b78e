# letras

A crossword tile game in Spanish for two to four players, played in a pygame
window. Players take turns placing letter tiles on a 15x15 board with premium
squares, forming words that are checked against a word list.

The tile set follows Spanish rules: it includes the digraph tiles `CH`, `LL`
and `RR`, the letter `Ñ`, and two blank wildcard tiles (worth 0 points) that
stand for a letter chosen when they are placed.

## Installing

```
pip install .
```

This installs the game together with its one dependency, pygame.

## Playing

```
letras [--players N] [--dictionary PATH] [--font PATH]
```

- `--players`: number of players, 2 to 4 (default 2). Any other number is
  rejected with a `ValueError`.
- `--dictionary`: word list in UTF-8, one lower-case word per line
  (default `res/dict/fise-2.txt`, relative to the current directory).
- `--font`: a TrueType font file; without it pygame's default font is used.

The 1200x800 window shows the board, the active player's rack, every player's
score and the number of tiles left in the bag.

- Click a tile in your rack to select it, then click an empty board square to
  place it. Placing a wildcard opens a letter picker; click the letter it
  stands for.
- **JUGAR** submits the tiles you placed this turn. The tiles must lie on a
  single row or column without empty squares between them, the first play
  must cover the centre square, later plays must sit next to a tile already on
  the board along their line, and the word formed must be in the word list.
  A valid play is scored, your rack is refilled to seven tiles (or as many as
  the bag still holds) and the turn passes on. A rejected play prints the
  failing rule and the reason on standard output, and the tiles stay where
  they are.
- **CANCELAR** takes this turn's tiles back to your rack, or leaves exchange
  mode.
- **CAMBIAR** enters exchange mode: select any number of rack tiles, press
  **CAMBIAR** again to swap them for tiles drawn from the bag, and the turn
  passes on. If the bag holds fewer tiles than you selected, nothing is
  swapped, a message is printed and your selection is cleared.

### Scoring

Each tile carries a base value. A light blue square doubles and a dark blue
square triples the letter placed on it; a pink square doubles and a red square
triples the whole word. Premium squares count only for tiles placed in the
turn that covers them.

## What the game does not do

- The word checked and scored is the one along the play's own line, made of
  the placed tiles and the board tiles directly next to them on that line.
  Words formed across the line are not checked or scored, and neither are
  board tiles further along the line than the immediate neighbours.
- There is no end of game, no passing a turn, and no saving or loading of a
  match.

## Using the pieces on their own

The rules are plain Python and can be used without a window:

```python
import random

from letras.bag import Bag
from letras.dictionary import Dictionary

bag = Bag(random.Random(0))
tile = bag.take_one()
print(tile.shown_letter(), len(bag))

words = Dictionary("res/dict/fise-2.txt")
print("hola" in words, words.is_valid("niño"))
```

- `letras.board.Board` holds the squares; `place_temp`, `placements`,
  `accept_placements` and `return_placements` manage the tiles of a turn.
- `letras.play.Play` collects a board's tentative placements and works out
  their line (`direction`, `fixed_coord_value`, `moving_coord_values`).
- `letras.rules.PlayBuilder` runs the rules `Contiguous`, `FirstMove`,
  `Connected`, `DictCheck` and `CalcScore` in that order; `build` sets
  `play.score`, and a play that breaks a rule raises `RuleViolation`, which
  carries the `rule` name and the `reason`.
- `letras.player.Player` and `letras.game.Game` hold a rack and a whole match.

## Running the tests

```
pip install ".[test]"
pytest
```