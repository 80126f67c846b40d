"""
Submission outcomes and the alert text a front end shows for them.

`describe` is a pure function of the result (and the root word, which one
message quotes), so presentation never needs to reach into session state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .constants import MIN_WORD_LENGTH


class Rejection(str, Enum):
    TOO_SHORT = "too_short"
    EQUALS_ROOT = "equals_root"
    ALREADY_USED = "already_used"
    NOT_SUBSETTABLE = "not_subsettable"
    NOT_A_REAL_WORD = "not_a_real_word"


@dataclass(frozen=True)
class Accepted:
    word: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    word: str
    reason: Rejection

    @property
    def accepted(self) -> bool:
        return False


SubmissionResult = Union[Accepted, Rejected]


_TITLES = {
    Rejection.TOO_SHORT: "Word is too short",
    Rejection.EQUALS_ROOT: "Word is similar to start word",
    Rejection.ALREADY_USED: "Word used already",
    Rejection.NOT_SUBSETTABLE: "Word not possible",
    Rejection.NOT_A_REAL_WORD: "Word not recognized",
}

_MESSAGES = {
    Rejection.TOO_SHORT: "Try to use a word at least {min_length} letters long",
    Rejection.EQUALS_ROOT: "Do not use start word",
    Rejection.ALREADY_USED: "Be more original",
    Rejection.NOT_SUBSETTABLE: "You can't spell that word from '{root}'!",
    Rejection.NOT_A_REAL_WORD: "You can't just make them up, you know!",
}


def rejection_title(reason: Rejection) -> str:
    return _TITLES[reason]


def describe(
        result: SubmissionResult,
        root_word: str,
        min_length: int = MIN_WORD_LENGTH,
) -> Tuple[str, str]:
    """
    Map a rejection to its (title, message) alert pair.

    Raises ValueError for an Accepted result: accepted words raise no alert.
    """
    if not isinstance(result, Rejected):
        raise ValueError(f"No alert for accepted word {result.word!r}")
    message = _MESSAGES[result.reason].format(root=root_word, min_length=min_length)
    return _TITLES[result.reason], message
