"""Conversions between characters and the numeric values used by check-digit sums."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

_ZERO = ord("0")
_DIGITS = "0123456789"


def char_to_digit(char: str) -> int:
    # str.isdigit() accepts non-ASCII digits, so compare against the ASCII set
    if len(char) != 1 or char not in _DIGITS:
        raise ValueError(f"Invalid character: {char!r}. Expected a digit between 0 and 9.")
    return ord(char) - _ZERO


def digit_to_char(digit: int) -> str:
    if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
        raise ValueError("Digit must be between 0 and 9")
    return chr(_ZERO + digit)


def char_to_value(char: str) -> int:
    """Character code minus the code of '0'.

    Digits map to 0-9 and uppercase letters to 17-42 ('A' -> 17). This is the
    encoding the CNPJ checksum uses, not an alphabet index.
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    return ord(char) - _ZERO


def to_digits(value: str) -> list[int]:
    return [char_to_digit(c) for c in value]


def digits_to_str(digits: Iterable[int]) -> str:
    return "".join(digit_to_char(d) for d in digits)


def is_repeated(value: Sequence[object]) -> bool:
    """True when every element is the same (e.g. '00000000000')."""
    return len(value) > 0 and len(set(value)) == 1
