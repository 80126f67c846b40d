"""
Exception hierarchy for conditions the game cannot recover from.

Rejected submissions are NOT errors: they are returned as `Rejected` values
(see wordscramble.engine.results). Exceptions here cover misconfiguration and
caller precondition violations only.
"""

from __future__ import annotations


class WordScrambleError(Exception):
    """Base class for all wordscramble exceptions."""


class WordListError(WordScrambleError):
    """The start word list is missing, unreadable or empty. Not retryable."""


class RoundNotStartedError(WordScrambleError, RuntimeError):
    """A submission arrived before the first round was started."""


class DictionaryUnavailableError(WordScrambleError):
    """The dictionary oracle's word data could not be found or fetched."""
