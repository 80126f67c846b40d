from .io import read_words
from .source import DEFAULT_WORDLIST, WordSource, load, pick_random
from .validator import audit_wordlist, pretty_summary

__all__ = ["read_words", "DEFAULT_WORDLIST", "WordSource", "load", "pick_random",
           "audit_wordlist", "pretty_summary"]
