"""
Submission rules.

A submitted word is accepted iff, in this order:
  1) it has at least MIN_WORD_LENGTH letters
  2) it is not the root word itself
  3) it has not been accepted already this round
  4) it can be spelled from the root word's letters (each letter used at most
     as many times as it appears in the root)
  5) the dictionary oracle recognises it

The order runs cheap to expensive and decides which reason a word is rejected
for: "zzqx" against "roadworks" fails check 4 and never reaches the oracle.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from .constants import DEFAULT_LANGUAGE, MIN_WORD_LENGTH
from .results import Rejection


def normalize(raw: str) -> str:
    """Lowercase and trim surrounding whitespace/newlines."""
    return raw.strip().lower()


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def differs_from_root(word: str, root: str) -> bool:
    return word != root


def is_original(word: str, used: Iterable[str]) -> bool:
    return word not in used


def is_possible(word: str, root: str) -> bool:
    """
    True if `word` can be spelled by consuming letters of `root`.

    Examples:
      is_possible("road", "roadworks")   -> True
      is_possible("words", "roadworks")  -> True
      is_possible("reed", "roadworks")   -> False  (no 'e' at all)
      is_possible("doors", "roadworks")  -> True   (two 'o's available)
      is_possible("rooor", "roadworks")  -> False  (only two 'o's)
    """
    remaining = Counter(root)
    for letter in word:
        if remaining[letter] <= 0:
            return False
        remaining[letter] -= 1  # consume one instance
    return True


def is_real(word: str, oracle, language: str = DEFAULT_LANGUAGE) -> bool:
    """Delegate to the dictionary oracle (see wordscramble.oracles)."""
    return bool(oracle.is_known_word(word, language))


def check_word(
        word: str,
        *,
        root: str,
        used: Iterable[str],
        oracle,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> Optional[Rejection]:
    """
    Run the five checks on an already-normalized word.

    Returns:
      The first failing Rejection, or None if the word passes every check.
    """
    if not is_long_enough(word, min_length):
        return Rejection.TOO_SHORT
    if not differs_from_root(word, root):
        return Rejection.EQUALS_ROOT
    if not is_original(word, used):
        return Rejection.ALREADY_USED
    if not is_possible(word, root):
        return Rejection.NOT_SUBSETTABLE
    if not is_real(word, oracle, language):
        return Rejection.NOT_A_REAL_WORD
    return None
