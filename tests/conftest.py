import random

import pytest

from wordscramble.engine import GameSession
from wordscramble.oracles import WordListOracle

DICTIONARY = ["road", "roads", "sword", "words", "work", "works", "door", "doors",
              "dark", "drawer", "row", "rows", "soda", "word", "zzqx"]


class SpyOracle(WordListOracle):
    """WordListOracle that records every word it is asked about."""

    def __init__(self, words, **kwargs):
        super().__init__(words, **kwargs)
        self.calls = []

    def is_known_word(self, word, language):
        self.calls.append((word, language))
        return super().is_known_word(word, language)


@pytest.fixture
def oracle():
    return SpyOracle(DICTIONARY)


@pytest.fixture
def session(oracle):
    s = GameSession(["roadworks"], oracle, rng=random.Random(0))
    s.start_round()
    return s
