from .results import Rejection, Accepted, Rejected, SubmissionResult, describe, rejection_title
from .rules import (MIN_WORD_LENGTH, DEFAULT_LANGUAGE, normalize, is_long_enough,
                    differs_from_root, is_original, is_possible, is_real, check_word)
from .session import GameSession

__all__ = [
    "Rejection", "Accepted", "Rejected", "SubmissionResult", "describe", "rejection_title",
    "MIN_WORD_LENGTH", "DEFAULT_LANGUAGE", "normalize", "is_long_enough",
    "differs_from_root", "is_original", "is_possible", "is_real", "check_word",
    "GameSession",
]
