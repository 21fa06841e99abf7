from __future__ import annotations

from dataclasses import dataclass

from brdocs.domain.errors import CheckDigitMismatchError, StructuralInvalidError
from brdocs.domain.services import cpf_check_digits
from brdocs.domain.services.digit_codec import digits_to_str, is_repeated, to_digits

LENGTH = 11
FORMATTED_LENGTH = 14


@dataclass(frozen=True)
class Cpf:
    """Value Object for a CPF (9-digit base + 2 check digits).

    Holds only normalized components, so two CPFs written with different
    punctuation compare and hash equal.
    """

    base: str
    check_digits: str

    def __post_init__(self) -> None:
        if not isinstance(self.base, str) or not isinstance(self.check_digits, str):
            raise StructuralInvalidError("The CPF components must be strings")
        if len(self.base) != cpf_check_digits.BASE_LENGTH or len(self.check_digits) != 2:
            raise StructuralInvalidError(f"The CPF must be {LENGTH} characters long")
        if not (self.base + self.check_digits).isascii() or not (self.base + self.check_digits).isdigit():
            raise StructuralInvalidError("The CPF must contain only digits")
        if is_repeated(self.value):
            raise StructuralInvalidError("The CPF is invalid")
        expected = digits_to_str(cpf_check_digits.calculate_check_digits(to_digits(self.base)))
        if expected != self.check_digits:
            raise CheckDigitMismatchError("The CPF is invalid")

    @classmethod
    def from_normalized(cls, value: str) -> Cpf:
        return cls(base=value[: LENGTH - 2], check_digits=value[LENGTH - 2 :])

    @staticmethod
    def layout(value: str) -> str:
        """'DDDDDDDDDDD' -> 'DDD.DDD.DDD-DD'; expects an already normalized value."""
        return f"{value[0:3]}.{value[3:6]}.{value[6:9]}-{value[9:]}"

    @property
    def value(self) -> str:
        return self.base + self.check_digits

    @property
    def formatted(self) -> str:
        return self.layout(self.value)

    def __str__(self) -> str:
        return self.formatted
