import logging

from bkspell.data.dictionary import Dictionary
from bkspell.data.loader import StaticWordSource


def test_rank_scores_and_max_frequency():
    d = Dictionary.from_source(StaticWordSource(["the", "of", "a", "and"]), 4, ["hello"])
    assert d.max_frequency == 4
    assert d.get("the") == 4
    assert d.get("of") == 3
    assert "a" not in d  # single letters are skipped but still count towards N
    assert d.get("and") == 1
    assert d.get("hello") == 4 * 1.2


def test_only_lowercase_alphabetic_words():
    d = Dictionary.from_source(StaticWordSource(["Hello", "it's", "ok", "x2"]), 10)
    assert list(d.scores) == ["ok"]


def test_boost_overrides_rank_in_place():
    d = Dictionary.from_source(StaticWordSource(["search", "the"]), 2, ["search", "fuzzy"])
    assert list(d.scores) == ["search", "the", "fuzzy"]
    assert d.get("search") == 2 * 1.2
    assert d.get("the") == 1


def test_size_limits_words_requested():
    words = ["one", "two", "three", "four", "five"]
    d = Dictionary.from_source(StaticWordSource(words), 3)
    assert len(d) == 3
    assert d.max_frequency == 3


class BrokenSource:
    def most_popular(self, n):
        raise ConnectionError("word service down")


def test_source_failure_gives_empty_dictionary(caplog):
    with caplog.at_level(logging.ERROR, logger="bkspell"):
        d = Dictionary.from_source(BrokenSource(), 100, ["hello"])
    assert len(d) == 0
    assert d.max_frequency == 0
    assert "word service down" in caplog.text


def test_trailing_newline_is_not_a_word():
    d = Dictionary.from_source(StaticWordSource(["abc\n", "ok"]), 2)
    assert "abc\n" not in d
    assert list(d.scores) == ["ok"]


def test_boost_terms_are_lowercased_and_filtered():
    d = Dictionary.from_source(StaticWordSource(["the"]), 1, ["Hello", "c++", "x", " fuzzy "])
    assert list(d.scores) == ["the", "hello", "fuzzy"]
