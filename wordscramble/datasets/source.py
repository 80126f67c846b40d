"""
Start word source.

Responsibilities:
- load:        read the bundled newline-delimited list of root words.
- pick_random: choose one root word uniformly at random.
- WordSource:  both of the above behind one object.

A missing or empty list is a packaging defect, not a runtime condition the
game can work around, so both paths raise WordListError instead of returning
a placeholder word.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .io import read_words
from wordscramble.errors import WordListError

logger = logging.getLogger(__name__)

# Bundled resource shipped as package data.
DEFAULT_WORDLIST = Path(__file__).parent / "data" / "start.txt"

Wordlist = Tuple[str, ...]


def load(path: Path | str | None = None) -> Wordlist:
    """
    Load candidate root words.

    Args:
      path : newline-delimited UTF-8 file; defaults to the bundled start.txt

    Returns:
      Tuple of lowercase words in file order, blank entries dropped.

    Raises:
      WordListError if the file is missing, unreadable, or holds no words.
    """
    p = Path(path) if path is not None else DEFAULT_WORDLIST
    try:
        words = tuple(read_words(p))
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Couldn't load start words from {p}") from e
    if not words:
        raise WordListError(f"Start word list is empty: {p}")

    logger.info("Loaded %d start words from %s", len(words), p)
    return words


def pick_random(words: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Uniformly pick one root word. `rng` makes the choice reproducible in tests.
    """
    if not words:
        raise WordListError("Cannot pick a root word from an empty word list")
    rng = rng or random.Random()
    return rng.choice(words)


class WordSource:
    """
    Loaded start words plus uniform selection.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else DEFAULT_WORDLIST
        self.words: Wordlist = load(self.path)

    def pick(self, rng: Optional[random.Random] = None) -> str:
        return pick_random(self.words, rng)

    def __len__(self) -> int:
        return len(self.words)
