"""CNPJ check digits, shared by the numeric and alphanumeric variants.

Every character is valued as its code minus the code of '0', so letters weigh
17 ('A') to 42 ('Z'). The result is always two ASCII digits.
"""
from __future__ import annotations

from brdocs.domain.errors import BaseMalformedError
from brdocs.domain.services.digit_codec import char_to_value, digit_to_char
from brdocs.domain.value_objects.cnpj_type import CnpjType

BASE_LENGTH = 12
WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3, 4, 5, 6)


def calculate_check_digit(chars: str) -> int:
    # weights are applied from the least-significant (rightmost) position
    last = len(chars) - 1
    total = sum(char_to_value(c) * WEIGHTS[last - i] for i, c in enumerate(chars))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def calculate_check_digits(base: str | None, type: CnpjType) -> str:
    if not isinstance(type, CnpjType):
        raise BaseMalformedError("The CNPJ type must not be None")
    if base is None or len(base) != BASE_LENGTH:
        raise BaseMalformedError("The CNPJ base must be 12 characters long")
    if any(c not in type.alphabet for c in base):
        raise BaseMalformedError(f"The CNPJ base has characters not allowed for {type.name}")
    first = digit_to_char(calculate_check_digit(base))
    second = digit_to_char(calculate_check_digit(base + first))
    return first + second
