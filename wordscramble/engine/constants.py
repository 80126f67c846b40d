# Single source of truth for the shortest playable word.
MIN_WORD_LENGTH = 3

# Language tag passed to the dictionary oracle.
DEFAULT_LANGUAGE = "en"
