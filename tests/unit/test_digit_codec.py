import pytest

from brdocs.domain.services.digit_codec import (
    char_to_digit,
    char_to_value,
    digit_to_char,
    digits_to_str,
    is_repeated,
    to_digits,
)


def test_digit_round_trip_bounds():
    assert [char_to_digit(c) for c in "0189"] == [0, 1, 8, 9]
    assert digit_to_char(7) == "7"
    for bad in (-1, 10, True):
        with pytest.raises(ValueError):
            digit_to_char(bad)
    for bad in ("a", "٣", "12", ""):
        with pytest.raises(ValueError):
            char_to_digit(bad)


def test_char_to_value_uses_code_minus_zero():
    assert char_to_value("0") == 0
    assert char_to_value("9") == 9
    assert char_to_value("A") == 17
    assert char_to_value("Z") == 42


def test_sequences_and_repetition():
    assert to_digits("0123") == [0, 1, 2, 3]
    assert digits_to_str([9, 0]) == "90"
    assert is_repeated("0000") is True
    assert is_repeated("0001") is False
    assert is_repeated("") is False
