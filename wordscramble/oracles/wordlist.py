"""
Word-list oracle.

A deterministic, in-memory dictionary for a single language. Used wherever a
live spell-check facility is unwanted: tests, offline play, or small curated
vocabularies.

Membership is case-insensitive; queries in any other language answer False.
"""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable

from .base import BaseOracle, register
from wordscramble.datasets.io import read_words


@register
class WordListOracle(BaseOracle):
    id = "wordlist"
    name = "Word List"

    def __init__(self, words: Iterable[str] = (), *, language: str = "en"):
        self.languages = [language]
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in words if w.strip()
        )

    @classmethod
    def from_file(cls, path: Path | str, *, language: str = "en") -> "WordListOracle":
        """Build an oracle from a newline-delimited UTF-8 word file."""
        return cls(read_words(path), language=language)

    def __len__(self) -> int:
        return len(self._words)

    def is_known_word(self, word: str, language: str) -> bool:
        if not self.supports(language):
            return False
        return word.strip().lower() in self._words
