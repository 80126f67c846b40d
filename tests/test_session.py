import random
from collections import Counter

import pytest

from wordscramble.engine import Accepted, GameSession, Rejected, Rejection
from wordscramble.errors import RoundNotStartedError, WordListError
from wordscramble.oracles import WordfreqOracle, WordListOracle


# --- roadworks scenarios ---

def test_accepts_real_subset_word(session):
    r = session.submit("road")
    assert r == Accepted("road")
    assert r.accepted is True
    assert session.used_words == ("road",)
    assert session.score == 1


@pytest.mark.parametrize("raw,reason", [
    ("roadworks", Rejection.EQUALS_ROOT),
    ("a", Rejection.TOO_SHORT),
    ("zzqx", Rejection.NOT_SUBSETTABLE),
    ("soar", Rejection.NOT_A_REAL_WORD),
])
def test_rejections(session, raw, reason):
    r = session.submit(raw)
    assert isinstance(r, Rejected)
    assert r.reason is reason
    assert r.accepted is False
    assert session.used_words == ()


def test_duplicate_rejected(session):
    assert session.submit("road").accepted
    r = session.submit("road")
    assert r == Rejected("road", Rejection.ALREADY_USED)
    assert session.used_words == ("road",)


def test_sword_reaches_dictionary(session, oracle):
    assert session.submit("sword") == Accepted("sword")
    assert ("sword", "en") in oracle.calls


def test_subset_check_short_circuits_oracle(session, oracle):
    session.submit("zzqx")
    session.submit("a")
    session.submit("roadworks")
    assert oracle.calls == []


def test_input_is_normalized(session):
    assert session.submit("  ROAD \n") == Accepted("road")
    assert session.submit("Road").reason is Rejection.ALREADY_USED


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_blank_input_is_ignored(session, oracle, raw):
    assert session.submit(raw) is None
    assert session.used_words == ()
    assert oracle.calls == []


def test_most_recent_first(session):
    for w in ["road", "sword", "doors"]:
        assert session.submit(w).accepted
    assert session.used_words == ("doors", "sword", "road")
    assert session.score == 3


def test_rejection_is_repeatable_and_side_effect_free(session):
    session.submit("road")
    before = (session.root_word, session.used_words)
    first = session.submit("reed")
    second = session.submit("reed")
    assert first == second == Rejected("reed", Rejection.NOT_SUBSETTABLE)
    assert (session.root_word, session.used_words) == before


# --- round lifecycle ---

def test_submit_before_start_round_raises():
    s = GameSession(["roadworks"], WordListOracle(["road"]))
    assert s.is_active is False
    assert s.root_word is None
    with pytest.raises(RoundNotStartedError):
        s.submit("road")


def test_start_round_clears_and_draws_from_wordlist():
    words = ["roadworks", "elephant", "umbrella"]
    s = GameSession(words, WordListOracle(["road", "work"]), rng=random.Random(7))
    s.start_round()
    s.submit("road")
    for _ in range(20):
        root = s.start_round()
        assert root in words
        assert s.root_word == root
        assert s.used_words == ()
        assert s.score == 0


def test_seeded_rng_is_reproducible():
    words = ["roadworks", "elephant", "umbrella", "keyboard", "sandwich"]
    a = GameSession(words, WordListOracle(), rng=random.Random(42))
    b = GameSession(words, WordListOracle(), rng=random.Random(42))
    assert [a.start_round() for _ in range(5)] == [b.start_round() for _ in range(5)]


def test_empty_wordlist_is_fatal():
    with pytest.raises(WordListError):
        GameSession([], WordListOracle())


def test_min_length_override():
    s = GameSession(["roadworks"], WordListOracle(["do"]), min_length=2)
    s.start_round()
    assert s.submit("do") == Accepted("do")


def test_from_bundled_with_given_oracle():
    s = GameSession.from_bundled(WordListOracle(["road"]), seed=1)
    root = s.start_round()
    assert root in s.wordlist
    assert len(s.wordlist) > 1


# --- invariants over many submissions ---

def test_accepted_words_respect_invariants():
    vocab = ["road", "roads", "sword", "words", "work", "works", "door", "doors",
             "dark", "soda", "rooks", "dorks", "ward", "wards", "roadwork"]
    s = GameSession(["roadworks"], WordListOracle(vocab))
    s.start_round()
    for w in vocab + vocab + ["roadworks", "ox", "drowsy", "woos"]:
        s.submit(w)

    root = Counter(s.root_word)
    assert len(set(s.used_words)) == len(s.used_words)
    for w in s.used_words:
        assert len(w) >= 3 and w != s.root_word
        assert all(n <= root[ch] for ch, n in Counter(w).items())


# --- construction ---

def test_wordlist_entries_are_normalized():
    s = GameSession([" Roadworks\n", "", "  "], WordListOracle(["road"]))
    assert s.wordlist == ("roadworks",)
    assert s.start_round() == "roadworks"
    assert s.submit("road") == Accepted("road")
    assert s.submit("ROADWORKS").reason is Rejection.EQUALS_ROOT


def test_blank_only_wordlist_is_fatal():
    with pytest.raises(WordListError):
        GameSession(["", "  \n"], WordListOracle())


def test_from_bundled_accepts_rng():
    a = GameSession.from_bundled(WordListOracle(), rng=random.Random(5))
    b = GameSession.from_bundled(WordListOracle(), seed=5)
    assert [a.start_round() for _ in range(5)] == [b.start_round() for _ in range(5)]


def test_session_describe_uses_its_min_length():
    s = GameSession(["roadworks"], WordListOracle(["road"]), min_length=4)
    s.start_round()
    r = s.submit("row")
    assert r.reason is Rejection.TOO_SHORT
    assert s.describe(r) == ("Word is too short", "Try to use a word at least 4 letters long")
    assert s.describe(s.submit("zzqx"))[1] == "You can't spell that word from 'roadworks'!"


# --- default dictionary ---

@pytest.mark.parametrize("word", ["road", "roads", "doors", "works", "sword", "words"])
def test_default_dictionary_accepts_inflected_words(word):
    s = GameSession(["roadworks"], WordfreqOracle())
    s.start_round()
    assert s.submit(word) == Accepted(word)


def test_default_dictionary_rejects_gibberish():
    s = GameSession(["roadworks"], WordfreqOracle())
    s.start_round()
    assert s.submit("rkdwo").reason is Rejection.NOT_A_REAL_WORD
