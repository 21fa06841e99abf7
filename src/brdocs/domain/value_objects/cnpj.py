from __future__ import annotations

from dataclasses import dataclass

from brdocs.domain.errors import CheckDigitMismatchError, StructuralInvalidError
from brdocs.domain.services import cnpj_check_digits
from brdocs.domain.services.digit_codec import is_repeated
from brdocs.domain.value_objects.cnpj_type import CnpjType

LENGTH = 14
FORMATTED_LENGTH = 18
ROOT_LENGTH = 8
ORDER_LENGTH = 4


@dataclass(frozen=True)
class Cnpj:
    """Value Object for a CNPJ: 8-char root, 4-char order, type and 2 check digits."""

    root: str
    order: str
    type: CnpjType
    check_digits: str

    def __post_init__(self) -> None:
        if not all(isinstance(c, str) for c in (self.root, self.order, self.check_digits)):
            raise StructuralInvalidError("The CNPJ components must be strings")
        if not isinstance(self.type, CnpjType):
            raise StructuralInvalidError("The CNPJ type must be a CnpjType")
        if (
            len(self.root) != ROOT_LENGTH
            or len(self.order) != ORDER_LENGTH
            or len(self.check_digits) != 2
        ):
            raise StructuralInvalidError(f"The CNPJ must be {LENGTH} characters long")
        if CnpjType.detect_from(self.value) is not self.type:
            raise StructuralInvalidError(f"The CNPJ is not classified as {self.type.name}")
        if is_repeated(self.value):
            raise StructuralInvalidError("The CNPJ is invalid")
        if cnpj_check_digits.calculate_check_digits(self.base, self.type) != self.check_digits:
            raise CheckDigitMismatchError("The CNPJ is invalid")

    @classmethod
    def from_normalized(cls, value: str, type: CnpjType) -> Cnpj:
        return cls(
            root=value[:ROOT_LENGTH],
            order=value[ROOT_LENGTH : ROOT_LENGTH + ORDER_LENGTH],
            type=type,
            check_digits=value[ROOT_LENGTH + ORDER_LENGTH :],
        )

    @staticmethod
    def layout(value: str) -> str:
        """'XXXXXXXXXXXXDD' -> 'XX.XXX.XXX/XXXX-DD'; expects an already normalized value."""
        return f"{value[0:2]}.{value[2:5]}.{value[5:8]}/{value[8:12]}-{value[12:]}"

    @property
    def base(self) -> str:
        return self.root + self.order

    @property
    def value(self) -> str:
        return self.base + self.check_digits

    @property
    def formatted(self) -> str:
        return self.layout(self.value)

    def __str__(self) -> str:
        return self.formatted
