"""
NLTK-backed English oracle.

Stands in for a platform spell checker by testing membership in the NLTK
`words` corpus. That corpus lists base forms only, so a word that misses is
retried through WordNet's lemmatizer as a noun and as a verb: "roads" and
"works" are accepted through "road" and "work".

Corpora are loaded on the first query, not at import or construction, so
building a session never touches the disk or network until a word actually
reaches the dictionary check. A missing corpus is fetched once with
`nltk.download`; if that fails, the failure is remembered and every later
query raises the same DictionaryUnavailableError without retrying.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional

import nltk
from nltk.corpus import words as words_corpus
from nltk.stem import WordNetLemmatizer

from .base import BaseOracle, register
from wordscramble.errors import DictionaryUnavailableError

logger = logging.getLogger(__name__)

# corpus id -> resource path for nltk.data.find
CORPORA = {
    "words": "corpora/words",
    "wordnet": "corpora/wordnet",
}

# WordNet parts of speech tried when the plain lookup misses.
LEMMA_POS = ("n", "v")


def _ensure_corpus(corpus_id: str) -> None:
    """Make sure an NLTK corpus is installed, downloading it if needed."""
    try:
        nltk.data.find(CORPORA[corpus_id])
        return
    except LookupError:
        logger.warning("NLTK corpus %r not found; downloading", corpus_id)

    if not nltk.download(corpus_id, quiet=True):
        raise DictionaryUnavailableError(
            f"NLTK corpus {corpus_id!r} is not installed and could not be downloaded")


def _load_vocabulary() -> FrozenSet[str]:
    _ensure_corpus("words")
    vocab = frozenset(w.lower() for w in words_corpus.words("en"))
    logger.info("Loaded %d words from NLTK corpus 'words'", len(vocab))
    return vocab


def _load_lemmatizer() -> WordNetLemmatizer:
    _ensure_corpus("wordnet")
    return WordNetLemmatizer()


@register
class NltkWordsOracle(BaseOracle):
    id = "nltk"
    name = "NLTK words corpus"
    languages = ["en"]

    def __init__(self):
        self._vocab: Optional[FrozenSet[str]] = None
        self._lemmatizer: Optional[WordNetLemmatizer] = None
        self._error: Optional[DictionaryUnavailableError] = None

    def _load(self) -> None:
        if self._error is not None:
            raise self._error
        try:
            if self._vocab is None:
                self._vocab = _load_vocabulary()
            if self._lemmatizer is None:
                self._lemmatizer = _load_lemmatizer()
        except DictionaryUnavailableError as e:
            self._error = e
            raise

    @property
    def vocabulary(self) -> FrozenSet[str]:
        self._load()
        return self._vocab

    def is_known_word(self, word: str, language: str) -> bool:
        if not self.supports(language):
            return False
        word = word.lower()
        vocab = self.vocabulary
        if word in vocab:
            return True
        for pos in LEMMA_POS:
            lemma = self._lemmatizer.lemmatize(word, pos)
            if lemma != word and lemma in vocab:
                return True
        return False
