"""
wordfreq-backed oracle.

A word is "real" if it is purely alphabetic and its Zipf frequency in the
requested language reaches `threshold`. wordfreq ships its frequency tables
inside the package and counts inflected forms ("roads", "doors", "works") as
words of their own, so no download or lemmatizing is needed.

Zipf scale: 0 means never seen, ~3 is an ordinary word, ~7 is "the".
"""

from __future__ import annotations

from wordfreq import available_languages, zipf_frequency

from .base import BaseOracle, register

# Low enough for plain plurals and less common words, high enough to keep
# out typos and one-off tokens that appear in web text.
DEFAULT_THRESHOLD = 2.0


@register
class WordfreqOracle(BaseOracle):
    id = "wordfreq"
    name = "wordfreq frequency lists"

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        self.threshold = float(threshold)
        self.languages = sorted(available_languages())

    def is_known_word(self, word: str, language: str) -> bool:
        if not self.supports(language) or not word.isalpha():
            return False
        return zipf_frequency(word.lower(), language) >= self.threshold
