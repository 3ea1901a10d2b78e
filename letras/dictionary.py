"""Word list used to validate plays."""

from __future__ import annotations

import os


class Dictionary:
    """A set of valid words read from a file, one word per line."""

    def __init__(self, path: str | os.PathLike) -> None:
        with open(path, encoding="utf-8") as handle:
            self._words = {line.rstrip("\n") for line in handle}

    def is_valid(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words