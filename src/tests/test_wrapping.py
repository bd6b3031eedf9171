import pytest

from codeprint.core.wrapping import wrap_text


def unit(_ch):
    return 1.0


def test_short_text_is_one_line():
    assert wrap_text("x = 1", 80, unit) == ["x = 1"]


def test_empty_text_is_one_empty_line():
    assert wrap_text("", 10, unit) == [""]


def test_breaks_at_last_space():
    assert wrap_text("hello world", 5, unit) == ["hello", "world"]
    assert wrap_text("one two three", 8, unit) == ["one two", "three"]


def test_long_word_is_split_between_characters():
    assert wrap_text("abcdefgh", 3, unit) == ["abc", "def", "gh"]


def test_trailing_break_adds_no_empty_line():
    assert wrap_text("ab ", 2, unit) == ["ab"]


def test_uses_character_advances():
    wide = {"W": 2.0}
    assert wrap_text("WWW", 4, lambda ch: wide.get(ch, 1.0)) == ["WW", "W"]


def test_rejects_non_positive_width():
    with pytest.raises(ValueError):
        wrap_text("text", 0, unit)
