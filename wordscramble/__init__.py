from .engine import GameSession, Accepted, Rejected, Rejection, describe
from .datasets import WordSource, load, pick_random
from .oracles import create_oracle, get_oracle_ids
from .errors import (WordScrambleError, WordListError, RoundNotStartedError,
                     DictionaryUnavailableError)

__all__ = [
    "GameSession", "Accepted", "Rejected", "Rejection", "describe",
    "WordSource", "load", "pick_random",
    "create_oracle", "get_oracle_ids",
    "WordScrambleError", "WordListError", "RoundNotStartedError", "DictionaryUnavailableError",
]
