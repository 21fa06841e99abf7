"""CPF check digits: weighted modulo-11 over a 9-digit base."""
from __future__ import annotations

from collections.abc import Sequence

from brdocs.domain.errors import BaseMalformedError

BASE_LENGTH = 9
# weights[len(digits) - i] puts the largest applicable weight on the leftmost digit
WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)


def _is_digit(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 9


def calculate_check_digit(digits: Sequence[int]) -> int:
    total = sum(d * WEIGHTS[len(digits) - i] for i, d in enumerate(digits))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def calculate_check_digits(base: Sequence[int] | None) -> tuple[int, int]:
    if base is None or len(base) != BASE_LENGTH or not all(_is_digit(d) for d in base):
        raise BaseMalformedError("The CPF base informed is invalid")
    first = calculate_check_digit(base)
    second = calculate_check_digit([*base, first])
    return first, second
