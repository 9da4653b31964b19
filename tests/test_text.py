import pytest

from algobox.text import (
    CharClass,
    classify_char,
    count_char,
    is_palindrome,
    reverse_line,
)


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("9", CharClass.DIGIT),
        ("x", CharClass.LOWER),
        ("R", CharClass.UPPER),
        ("#", CharClass.SPECIAL),
    ],
)
def test_classify_samples(ch, expected):
    assert classify_char(ch) is expected


def test_class_labels_match_messages():
    assert CharClass.DIGIT.value == "digit"
    assert classify_char("a").value == "Alphabet small case"


def test_non_ascii_letter_is_special():
    assert classify_char("é") is CharClass.SPECIAL


@pytest.mark.parametrize("bad", ["", "ab"])
def test_classify_needs_one_character(bad):
    with pytest.raises(ValueError):
        classify_char(bad)


def test_count_char_counts_every_occurrence():
    assert count_char("a" * 7, "a") == 7


def test_count_char_is_case_sensitive():
    assert count_char("AAA", "a") == 0


def test_count_char_needs_one_character():
    with pytest.raises(ValueError):
        count_char("text", "te")


@pytest.mark.parametrize("word", ["racecar", "abba", "x", ""])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["abc", "ab", "Abba"])
def test_non_palindromes(word):
    assert is_palindrome(word) is False


def test_reverse_line_drops_newline():
    assert reverse_line("abc\n") == "cba"


@pytest.mark.parametrize("text", ["hello world", "a", "12 34"])
def test_reverse_line_round_trip(text):
    assert reverse_line(reverse_line(text + "\n") + "\n") == text


@pytest.mark.parametrize("line", ["", "\n"])
def test_reverse_line_rejects_empty(line):
    with pytest.raises(ValueError):
        reverse_line(line)