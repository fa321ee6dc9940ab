import pytest

from bkspell.utils.distance import get_metric, levenshtein_distance, sift3_distance


def test_empty_strings():
    assert sift3_distance("", "cat") == 3
    assert sift3_distance("cat", "") == 3
    assert sift3_distance("", "") == 0


def test_identical_strings():
    assert sift3_distance("cat", "cat") == 0
    assert sift3_distance("programming", "programming") == 0


def test_returns_half_steps():
    d = sift3_distance("hello", "helo")
    assert isinstance(d, float)
    assert d == 1.5


def test_substitution_at_end():
    assert sift3_distance("help", "helo") == 1.0


def test_transposition_realigns():
    assert sift3_distance("at", "ta") == 2.0


@pytest.mark.parametrize("a,b", [
    ("help", "hello"),
    ("hello", "helo"),
    ("help", "world"),
    ("at", "ta"),
])
def test_symmetric_on_known_pairs(a, b):
    assert sift3_distance(a, b) == sift3_distance(b, a)


def test_nonidentical_words_are_never_zero():
    words = ["a", "aa", "ab", "ba", "at", "ta", "it", "ti", "aab", "aba"]
    for a in words:
        for b in words:
            if a != b:
                assert sift3_distance(a, b) > 0


def test_levenshtein_is_exact():
    assert levenshtein_distance("kitten", "sitting") == 3.0
    assert levenshtein_distance("", "abc") == 3.0


def test_get_metric():
    assert get_metric("sift3") is sift3_distance
    assert get_metric("levenshtein") is levenshtein_distance
    with pytest.raises(ValueError):
        get_metric("soundex")
