"""
Game session: one player, one root word at a time, a growing list of accepted
words.

- start_round: pick a fresh root word and clear accepted words.
- submit:      normalize, run the rule checks, record the word on success.

The session holds no presentation state. Callers render `root_word`,
`used_words` and `score`, and turn `Rejected` results into alerts with
`wordscramble.engine.results.describe`.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .results import Accepted, Rejected, SubmissionResult, describe
from .rules import DEFAULT_LANGUAGE, MIN_WORD_LENGTH, check_word, normalize
from wordscramble.datasets.source import load, pick_random
from wordscramble.errors import RoundNotStartedError, WordListError

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
            self,
            wordlist: Sequence[str],
            oracle,
            *,
            rng: random.Random | None = None,
            language: str = DEFAULT_LANGUAGE,
            min_length: int = MIN_WORD_LENGTH,
    ):
        """
        Args:
          wordlist   : candidate root words (see wordscramble.datasets.load)
          oracle     : object with is_known_word(word, language) -> bool
          rng        : random source for root selection; seed it for reproducible rounds
          language   : language tag handed to the oracle
          min_length : shortest word accepted
        """
        # root words must compare equal to normalized submissions
        self.wordlist: Tuple[str, ...] = tuple(w for w in map(normalize, wordlist) if w)
        if not self.wordlist:
            raise WordListError("GameSession needs a non-empty word list")
        self.oracle = oracle
        self.rng = rng or random.Random()
        self.language = language
        self.min_length = int(min_length)

        self._root: Optional[str] = None
        self._used: List[str] = []

    @classmethod
    def from_bundled(
            cls,
            oracle=None,
            *,
            seed: int | None = None,
            rng: random.Random | None = None,
            path: Path | str | None = None,
            oracle_id: str = "wordfreq",
            **kwargs,
    ) -> "GameSession":
        """
        Build a session over the bundled start words.

        When `oracle` is None, one is created from the registry by `oracle_id`.
        An explicit `rng` takes precedence over `seed`.
        """
        if oracle is None:
            from wordscramble.oracles import create_oracle
            oracle = create_oracle(oracle_id)
        if rng is None:
            rng = random.Random(seed)
        return cls(load(path), oracle, rng=rng, **kwargs)

    # ---- read-only state ----

    @property
    def root_word(self) -> Optional[str]:
        return self._root

    @property
    def used_words(self) -> Tuple[str, ...]:
        """Accepted words, most recent first."""
        return tuple(self._used)

    @property
    def score(self) -> int:
        return len(self._used)

    @property
    def is_active(self) -> bool:
        return self._root is not None

    # ---- operations ----

    def start_round(self) -> str:
        """Pick a new root word and clear accepted words. Returns the root word."""
        self._root = pick_random(self.wordlist, self.rng)
        self._used = []
        logger.info("New round: root word %r", self._root)
        return self._root

    def submit(self, raw: str) -> Optional[SubmissionResult]:
        """
        Try to add `raw` to the accepted words.

        Returns:
          None      if the input is blank after trimming (ignored, no state change)
          Accepted  if every check passed; the word is now first in used_words
          Rejected  with the first failing reason; state is untouched

        Raises:
          RoundNotStartedError if called before start_round().
        """
        if self._root is None:
            raise RoundNotStartedError("submit() called before start_round()")

        word = normalize(raw)
        if not word:
            return None

        reason = check_word(
            word,
            root=self._root,
            used=self._used,
            oracle=self.oracle,
            language=self.language,
            min_length=self.min_length,
        )
        if reason is not None:
            logger.debug("Rejected %r against %r: %s", word, self._root, reason.value)
            return Rejected(word, reason)

        self._used.insert(0, word)
        logger.debug("Accepted %r (score %d)", word, self.score)
        return Accepted(word)

    def describe(self, result: SubmissionResult) -> Tuple[str, str]:
        """Alert (title, message) for a rejection in the current round."""
        return describe(result, self._root or "", self.min_length)

    def __repr__(self) -> str:
        return f"GameSession(root_word={self._root!r}, score={self.score})"
