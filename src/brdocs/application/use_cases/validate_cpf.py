from __future__ import annotations

import logging

from brdocs.application.dtos.validation_result_dto import ValidationResult
from brdocs.application.ports.normalizer_port import NormalizerPort
from brdocs.config import mask
from brdocs.domain.errors import ErrorKind, require_non_blank
from brdocs.domain.services import cpf_check_digits
from brdocs.domain.services.digit_codec import digits_to_str, is_repeated, to_digits
from brdocs.domain.value_objects.cpf import LENGTH, Cpf

logger = logging.getLogger(__name__)

_INVALID = "The CPF is invalid"


class ValidateCpfUseCase:
    """Input -> cleared -> repeated-digit guard -> check-digit verification.

    Every call is independent and never touches its input. Blank input raises
    InputMissingError; every other rejection comes back as an INVALID result.
    """

    def __init__(self, normalizer: NormalizerPort) -> None:
        self.normalizer = normalizer

    def execute(self, raw: str | None) -> ValidationResult:
        require_non_blank(raw, "The CPF must not be null or blank")
        cleared = self.normalizer.clear(raw)
        if len(cleared) != LENGTH:
            logger.debug("CPF rejected: %d digits after clearing", len(cleared))
            return ValidationResult.invalid(ErrorKind.STRUCTURAL_INVALID, _INVALID)
        if is_repeated(cleared):
            logger.debug("CPF rejected: repeated digit %s", mask(cleared))
            return ValidationResult.invalid(ErrorKind.STRUCTURAL_INVALID, _INVALID)

        base, supplied = cleared[: LENGTH - 2], cleared[LENGTH - 2 :]
        expected = digits_to_str(cpf_check_digits.calculate_check_digits(to_digits(base)))
        if expected != supplied:
            logger.debug("CPF rejected: check digit mismatch for %s", mask(cleared))
            return ValidationResult.invalid(ErrorKind.CHECK_DIGIT_MISMATCH, _INVALID)
        return ValidationResult.valid("CPF")

    def parse(self, raw: str | None) -> Cpf:
        self.execute(raw).raise_for_error()
        return Cpf.from_normalized(self.normalizer.normalize(raw))
