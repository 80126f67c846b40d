from __future__ import annotations
from typing import List
from .base import BaseOracle, REGISTRY, register

from . import wordlist  # noqa: F401
from . import nltk_words  # noqa: F401
from . import wordfreq_words  # noqa: F401
from .wordlist import WordListOracle
from .nltk_words import NltkWordsOracle
from .wordfreq_words import WordfreqOracle


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id.
    Keyword arguments are passed to the oracle's constructor.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable listings).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseOracle", "REGISTRY", "register", "WordListOracle", "NltkWordsOracle", "WordfreqOracle",
           "create_oracle", "get_oracle_ids"]
